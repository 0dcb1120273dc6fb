import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import db, settings
from hotels import router as hotels_router
from hotels import service as hotels_service

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One storage handle per process, handed to requests via `get_db`.
    database = db.Database()
    await database.connect()
    app.state.db = database
    try:
        await hotels_service.ensure_schema(database)
    except Exception:
        logger.exception("schema_init_failed")
    try:
        yield
    finally:
        await database.close()


app = FastAPI(
    title="Hotel API",
    description="API for the hotel records service",
    version="1.0.0",
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Undecodable bodies fail like any other request error.
    errors = exc.errors()
    message = str(errors[0].get("msg")) if errors else "Invalid request."
    logger.error("request_body_invalid detail=%s", message)
    return hotels_router.envelope(500, message)


@app.exception_handler(db.StorageError)
async def storage_error_handler(_: Request, exc: db.StorageError) -> JSONResponse:
    logger.error("storage_error detail=%s", exc)
    return hotels_router.envelope(500, str(exc))


app.include_router(hotels_router.router, tags=["hotels"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "hotel api"}


def run() -> None:
    import uvicorn

    logging.basicConfig(level=settings.log_level())
    logger.info("server_starting port=%s", settings.port())
    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    run()
