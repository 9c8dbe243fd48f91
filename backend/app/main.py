import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

from app.config import ALLOWED_ORIGINS, HOST, PORT
from app.database import StorageError, init_db
from app.api.endpoints import auth, suppliers, rfps, bids

logger = logging.getLogger(__name__)


def _server_error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": "Internal server error", "error": str(exc)})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """401/404 from handlers carry their text under "message", like every other error body."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return JSONResponse(status_code=422, content={"message": "Invalid request", "error": errors})


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return _server_error(exc)


async def unhandled_error_handler(request: Request, exc: Exception):
    # Catch-all: every failure kind collapses to the same 500 envelope.
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return _server_error(exc)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Procurement Platform API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(suppliers.router)
app.include_router(rfps.router)
app.include_router(bids.router)

install_error_handlers(app)


@app.get("/health")
def health():
    """Health check endpoint for load balancers and readiness probes."""
    return {"status": "ok", "service": "procurement-backend"}


def run() -> None:
    import uvicorn

    logger.info("Server is running on port %s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
