from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.config.settings import get_settings
from api.database.connection import close_db, init_db
from api.middleware.error_handler import error_handler_middleware, setup_error_handlers
from api.middleware.request_id import RequestIDMiddleware, get_request_id

logger = logging.getLogger("api.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup when configured; dispose the engine on shutdown."""
    if get_settings().create_tables_on_startup:
        logger.info("Creating database tables")
        await init_db()
    yield
    await close_db()


app = FastAPI(
    title="Metaverse API",
    description="Backend for a 2D metaverse: accounts, catalog, maps and spaces",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and latency."""
    start_time = time.time()
    path = request.url.path
    method = request.method

    # Health checks are too frequent to log
    skip_logging = method == "GET" and path == "/health"

    if not skip_logging:
        logger.info(f"🔔 {method} {path}")

    try:
        response = await call_next(request)

        process_time = time.time() - start_time
        status_code = response.status_code

        if status_code < 400:
            status_str = f"✅ {status_code}"
        elif status_code < 500:
            status_str = f"⚠️ {status_code}"
        else:
            status_str = f"❌ {status_code}"

        if not skip_logging:
            logger.info(f"🏁 {method} {path} - {status_str} - {process_time:.3f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            f"💥 REQ#{get_request_id()} ERROR: {method} {path} - {e} - {process_time:.4f}s"
        )
        raise


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(error_handler_middleware)

# Added last so it wraps everything and the id is set before any log line
app.add_middleware(RequestIDMiddleware)

setup_error_handlers(app)

from api.routers import admin_router, auth_router, catalog_router, space_router, user_router

app.include_router(auth_router.router)
app.include_router(admin_router.router)
app.include_router(catalog_router.router)
app.include_router(space_router.router)
app.include_router(user_router.router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Metaverse API"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}
