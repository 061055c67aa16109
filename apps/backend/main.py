import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.config import settings
from jobly.database import close_db, engine, init_db
from jobly.errors import JoblyError, error_body, jobly_error_handler
from jobly.health import check_postgres
from jobly.routers import jobs

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("jobly")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables on the pooled engine
    logger.info("Starting Jobly backend")
    await init_db()
    logger.info("Database tables created successfully")
    yield
    # Shutdown: Close connections
    logger.info("Shutting down Jobly backend")
    await close_db()
    logger.info("Database connections closed")

app = FastAPI(
    title=settings.app_name,
    description="Jobs and companies REST backend",
    version="0.1.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(JoblyError, jobly_error_handler)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report invalid bodies and params as 400 with each failing field."""
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(messages, status.HTTP_400_BAD_REQUEST),
    )


# Include routers
app.include_router(jobs.router)


@app.get("/")
async def root():
    return {"message": "Jobly API - Ready"}


@app.get("/health")
async def health_check():
    """Report database connectivity."""
    postgres_health = await check_postgres(engine)
    return {
        "status": "healthy" if postgres_health.status == "connected" else "degraded",
        "dependencies": {
            "postgres": postgres_health.status,
        },
        "latency_ms": postgres_health.latency_ms,
    }
