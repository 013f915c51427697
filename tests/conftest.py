import os

# Keep test runs from writing log files into the working directory
os.environ.setdefault("FILESERVER_LOG_TO_FILE", "false")
