import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, Float, DateTime, Boolean, ForeignKey, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ..database import Base


class QuestionCategory(str, enum.Enum):
    CAREER_GAP = "career-gap"
    SKILLS = "skills"
    RECOMMENDATIONS = "recommendations"
    GENERAL = "general"


class Question(Base):
    """A question asked to the career assistant and the answer it gave"""
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    question = Column(String(500), nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(
        SQLEnum(QuestionCategory, values_callable=lambda e: [m.value for m in e]),
        default=QuestionCategory.GENERAL,
        nullable=False
    )
    intent = Column(String(50), nullable=True)
    confidence = Column(Float, default=0.0)  # 0-100
    context = Column(JSON, default=dict)
    helpful = Column(Boolean, nullable=True)
    processing_time_ms = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="questions")
