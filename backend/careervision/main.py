import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .config import get_settings
from .database import async_session_maker, init_db
from .routers import resumes_router, timeline_router, qna_router, recommendations_router
from .services.intent_classifier import NearestNeighbourIntentClassifier
from .services.resume_processing import ResumeProcessingQueue

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    await init_db()
    app.state.intent_classifier = NearestNeighbourIntentClassifier(
        threshold=settings.intent_confidence_threshold
    )
    app.state.resume_queue = ResumeProcessingQueue(async_session_maker)
    logger.info("%s started", settings.app_name)
    yield
    # Shutdown: let in-flight resume processing finish writing its status
    await app.state.resume_queue.join()


app = FastAPI(
    title=settings.app_name,
    description="CareerVision resume parsing and career timeline API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,  # Disable docs in production
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware - uses origins from environment variable
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class NoCacheMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        # Resume status is polled; never serve it from a browser cache
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response

app.add_middleware(NoCacheMiddleware)

# Include routers
app.include_router(resumes_router)
app.include_router(timeline_router)
app.include_router(qna_router)
app.include_router(recommendations_router)


@app.get("/")
async def root():
    return {"message": "CareerVision API", "status": "running", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancer"""
    return {"status": "healthy"}
