from fileserver.files.exceptions import InternalError, NotFoundError, from_os_error
from fileserver.files.paths import join_path, resolve_path


class TestPaths:
    def test_resolve_defaults_to_working_directory(self):
        assert resolve_path(None) == "."

    def test_resolve_keeps_path_unchanged(self):
        assert resolve_path("../outside") == "../outside"
        assert resolve_path("") == ""

    def test_join(self):
        assert join_path("base", "name") == "base/name"
        assert join_path("/abs/dir", "file.txt") == "/abs/dir/file.txt"

    def test_join_empty_base(self):
        assert join_path("", "name") == "name"


class TestFromOsError:
    def test_not_found_only_when_requested(self):
        error = FileNotFoundError(2, "No such file or directory")

        assert isinstance(from_os_error(error, "x", not_found=True), NotFoundError)
        assert isinstance(from_os_error(error, "x"), InternalError)

    def test_other_errors_are_internal(self):
        error = PermissionError(13, "Permission denied")

        mapped = from_os_error(error, "x", not_found=True)

        assert isinstance(mapped, InternalError)
        assert mapped.path == "x"
        assert "PermissionError" in mapped.message
