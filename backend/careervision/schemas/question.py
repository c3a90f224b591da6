from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from ..models.question import QuestionCategory


class QuestionAsk(BaseModel):
    question: str = Field(..., min_length=3, max_length=500)


class AnswerResponse(BaseModel):
    question_id: int
    answer: str
    category: QuestionCategory
    intent: Optional[str] = None
    confidence: float


class QuestionResponse(BaseModel):
    id: int
    question: str
    answer: str
    category: QuestionCategory
    intent: Optional[str] = None
    confidence: float
    context: Dict[str, Any] = Field(default_factory=dict)
    helpful: Optional[bool] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class QuestionHistoryResponse(BaseModel):
    data: List[QuestionResponse]
    page: int
    limit: int
    total: int
    pages: int


class AnswerRating(BaseModel):
    helpful: bool


class JobRecommendation(BaseModel):
    title: str
    company: str
    location: str
    match_score: int
    skills: List[str] = Field(default_factory=list)


class CourseRecommendation(BaseModel):
    title: str
    provider: str
    level: str
    duration: str
    match_score: int
    free: bool = False
    skills: List[str] = Field(default_factory=list)
