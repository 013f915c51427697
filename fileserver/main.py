from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from starlette.middleware.cors import CORSMiddleware

from .access_log import AccessLogMiddleware
from .config import settings
from .files import FileOperationError
from .logger import logger
from .routers import files, folders


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    logger.info(
        f"API docs available at http://{settings.host}:{settings.port}/swagger-ui/"
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    lifespan=lifespan,
    title="File Server",
    docs_url="/swagger-ui",
    openapi_url="/api-docs/openapi.json",
    redoc_url=None,
)

# Middlewares added later run first
app.add_middleware(AccessLogMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(files.router)
app.include_router(folders.router)


@app.exception_handler(FileOperationError)
async def file_operation_error_handler(request: Request, exc: FileOperationError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    # Clients only get the status code
    return Response(status_code=exc.status_code)
