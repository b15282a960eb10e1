"""
FastAPI application main module.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from .config import ACTION_PATH
from .dependencies.solana import close_rpc_client, get_config, open_rpc_client
from .middleware import ACTIONS_ALLOWED_HEADERS, ACTIONS_EXPOSED_HEADERS, ActionHeadersMiddleware
from .routers.actions import router as actions_router
from .utils.logging_config import setup_logging

# Configure logging
logger = setup_logging('dispenser.main')

config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI app.
    Opens the shared RPC client on startup and closes it on shutdown.
    """
    logger.info("Starting up NFT dispenser...")
    await open_rpc_client(config)
    logger.info(f"Serving action at {config.action_url}")
    try:
        yield
    finally:
        await close_rpc_client()
        logger.info("Application shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="NFT Dispenser Action",
    description="""
    Solana Action that hands out a partially signed transaction minting an NFT
    to the requesting wallet.
    """,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Actions are fetched by wallets and unfurlers from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=ACTIONS_ALLOWED_HEADERS,
    expose_headers=ACTIONS_EXPOSED_HEADERS,
    max_age=600,
)
app.add_middleware(
    ActionHeadersMiddleware,
    action_version=config.action_version,
    blockchain_id=config.blockchain_id,
)

# Add Prometheus metrics
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

app.include_router(actions_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report malformed action requests the way the action routes report errors.
    """
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    if request.url.path == ACTION_PATH and request.method == "POST":
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})
    return JSONResponse(status_code=400, content={"message": "Invalid request"})
