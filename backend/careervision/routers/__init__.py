from .resumes import router as resumes_router
from .timeline import router as timeline_router
from .qna import router as qna_router
from .recommendations import router as recommendations_router

__all__ = [
    "resumes_router", "timeline_router", "qna_router", "recommendations_router"
]
