"""
NBA Data API — team/season records, roster and schedule links.

create_app() wires routers, request logging and error handlers. The
module-level `app` is what uvicorn serves; it connects to MongoDB in its
lifespan and refuses to start without a usable MONGODB_URI.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, get_settings
from .database import SeasonStore, connect
from .logging_config import RequestLogger, setup_logging
from .middleware import RequestLoggingMiddleware
from .routers.seasons import router as seasons_router
from .schemas.errors import ErrorResponse

WELCOME = "Welcome to the NBA Data API!"


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    err = ErrorResponse.for_status(exc.status_code, str(exc.detail), _request_id(request))
    return JSONResponse(err.body(), status_code=exc.status_code,
                        headers=getattr(exc, "headers", None))


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    err = ErrorResponse.for_status(422, "Invalid request", _request_id(request),
                                   detail=jsonable_encoder(exc.errors()))
    return JSONResponse(err.body(), status_code=422)


def create_app(settings: Settings | None = None, store: SeasonStore | None = None,
               request_logger: RequestLogger | None = None) -> FastAPI:
    """Build the application.

    Passing `store` skips the MongoDB connection entirely (tests, embedding).
    Otherwise settings are loaded and the store connected in the lifespan.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if app.state.store is None:
            cfg = settings or get_settings()
            setup_logging(cfg)
            client = connect(cfg)
            app.state.store = SeasonStore.from_client(client, cfg)
        yield
        if client is not None:
            client.close()
            logger.info("MongoDB connection closed")

    app = FastAPI(title="NBA Data API", version=__version__, lifespan=lifespan)
    app.state.store = store
    app.add_middleware(RequestLoggingMiddleware, request_logger=request_logger or RequestLogger())
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)

    @app.api_route("/", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
                   response_class=PlainTextResponse)
    def index():
        return WELCOME

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    app.include_router(seasons_router)
    return app


app = create_app()
