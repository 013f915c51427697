import uvicorn

from .config import settings
from .main import app


def main():
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
