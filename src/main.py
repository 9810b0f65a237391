from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from src.config import settings
from src.cors_config import get_cors_config
from src.database import create_db_and_tables, engine
from src.exceptions import StoreUnavailableError
from src.routers import authors, books, general
from src.seed import reset_database
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        create_db_and_tables()
    except SQLAlchemyError as e:
        # Keep serving; requests report 503 until the store is reachable
        logger.error(f"Creating tables failed, skipping startup seed: {e}")
    else:
        if settings.reset_database:
            reset_database(engine)
    yield


app = FastAPI(
    title="Authors and Books Codealong API",
    description="""
    A small read-only API over a collection of authors and their books.

    ## Features

    * **Authors**: List every author or look one up by id
    * **Books by author**: List the books that reference a given author
    * **Books**: List every book with its author populated

    Set `RESET_DATABASE=true` to wipe the store and load the demo dataset on startup.
    """,
    version="1.0.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
    openapi_tags=[
        {
            "name": "general",
            "description": "Greeting and health check endpoints",
        },
        {
            "name": "authors",
            "description": "Browse authors and the books they wrote",
        },
        {
            "name": "books",
            "description": "Browse books with their authors populated",
        },
    ],
    lifespan=lifespan,
)

# Configure CORS
cors_config = get_cors_config(production_origin=settings.cors_allow_origin)
app.add_middleware(CORSMiddleware, **cors_config)


# Error payloads share the {"error": ...} shape
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=503, content={"error": "Database unavailable"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error for {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Include routers
app.include_router(general.router)
app.include_router(authors.router)
app.include_router(books.router)
