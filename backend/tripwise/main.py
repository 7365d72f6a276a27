import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tripwise.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "tripwise.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from tripwise.errors import InputValidationError, RecoveryFailure, TripWiseError
from tripwise.routers import bookings, comparisons, flights, hotels, safety, trips
from tripwise.services.amadeus_client import amadeus_client
from tripwise.services.currency_client import currency_client
from tripwise.services.llm_client import llm_client
from tripwise.services.news_client import news_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"TripWise starting (llm={'on' if llm_client.is_configured else 'off'}, "
        f"amadeus={'on' if amadeus_client.is_configured else 'off'}, "
        f"news={'on' if news_client.is_configured else 'off'})"
    )

    yield

    # Shutdown
    await amadeus_client.close()
    await currency_client.close()
    await news_client.close()
    logger.info("HTTP clients closed")


app = FastAPI(
    title="TripWise",
    description="AI Travel Planning Aggregator",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.monotonic()
    try:
        response = await call_next(request)
    except Exception:
        elapsed = round((time.monotonic() - start) * 1000)
        logger.exception(f"{request.method} {request.url.path} failed after {elapsed}ms")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"},
        )
    elapsed = round((time.monotonic() - start) * 1000)
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed}ms")
    return response


# ─── Error rendering ───


@app.exception_handler(InputValidationError)
async def input_validation_handler(request: Request, exc: InputValidationError):
    content = {"success": False, "error": exc.message}
    if exc.missing:
        content["missing"] = exc.missing
    if exc.invalid:
        content["invalid"] = exc.invalid
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RecoveryFailure)
async def recovery_failure_handler(request: Request, exc: RecoveryFailure):
    logger.error(f"Unparseable AI response on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message, "details": exc.detail},
    )


@app.exception_handler(TripWiseError)
async def tripwise_error_handler(request: Request, exc: TripWiseError):
    logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code, content={"success": False, "error": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    invalid = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        name = loc[0] if loc else "body"
        if name not in invalid:
            invalid.append(name)
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request", "invalid": invalid},
    )


app.include_router(trips.router, prefix="/api", tags=["trips"])
app.include_router(comparisons.router, prefix="/api", tags=["comparisons"])
app.include_router(safety.router, prefix="/api", tags=["safety"])
app.include_router(flights.router, prefix="/api", tags=["flights"])
app.include_router(hotels.router, prefix="/api", tags=["hotels"])
app.include_router(bookings.router, prefix="/api", tags=["bookings"])


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "openai_configured": llm_client.is_configured,
        "amadeus": "configured" if amadeus_client.is_configured else "not configured",
        "news_configured": news_client.is_configured,
    }
