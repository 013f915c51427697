import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

_CONFIG_PATH = os.getenv("FILESERVER_CONFIG", "config.toml")
_ENV_PATH = os.getenv("FILESERVER_ENV", ".env")


class CorsSettings(BaseModel):
    allow_origins: list[str] = ["*"]


class UploadSettings(BaseModel):
    max_files: int = 1000
    max_fields: int = 1000
    chunk_size: int = 1024 * 1024  # 1MB


class AccessLogSettings(BaseModel):
    enabled: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FILESERVER_",
        env_nested_delimiter="__",
        toml_file=_CONFIG_PATH,
        env_file=_ENV_PATH,
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3000

    logs_dir: Path = Field(default=Path("logs"))
    log_level: str = "INFO"
    log_to_file: bool = True

    cors: CorsSettings = Field(default_factory=CorsSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)
    access_log: AccessLogSettings = Field(default_factory=AccessLogSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Source order: init args > OS env > .env > config.toml > secrets
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


settings = Settings()
