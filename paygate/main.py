import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paygate.config import settings
from paygate.engine.dispatcher import PaymentDispatcher
from paygate.processors.registry import ProcessorRegistry
from paygate.routers import payments, processors
from paygate.services.log_sink import open_log_sink

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    logger.info("PayGate starting up...")

    # The sink stays open for the whole lifetime of the app and is closed on
    # shutdown, including when startup or shutdown fails.
    with open_log_sink(settings.LOG_FILE_PATH, level=settings.LOG_LEVEL) as sink:
        registry = ProcessorRegistry(sink, settings)
        app.state.registry = registry
        app.state.dispatcher = PaymentDispatcher(sink)

        logger.info(
            f"Processors loaded: {[p.name for p in registry.all()]} | "
            f"log file={settings.LOG_FILE_PATH} | "
            f"latency unit={settings.LATENCY_UNIT_SECONDS}s | "
            f"seed={settings.RANDOM_SEED}"
        )

        yield

        # --- Shutdown ---
        logger.info("PayGate shutting down.")


app = FastAPI(
    title="PayGate Payment Dispatcher",
    description=(
        "Dispatches payments to wallet, card-network and bank-transfer "
        "processors with per-processor field validation and simulated outcomes."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(payments.router, tags=["Payments"])
app.include_router(processors.router, tags=["Processors"])


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal error occurred. Please try again later."},
    )


@app.get("/", tags=["Health"])
async def root():
    return {
        "service": "PayGate Payment Dispatcher",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }
