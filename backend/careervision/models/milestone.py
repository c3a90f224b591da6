"""
Milestone model - a single dated career event owned by a user
"""
import enum
from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, Text, Date, DateTime, Boolean,
    ForeignKey, Index, JSON, Enum as SQLEnum
)
from sqlalchemy.orm import relationship
from ..database import Base


class MilestoneType(str, enum.Enum):
    EDUCATION = "education"
    JOB = "job"
    CERTIFICATION = "certification"
    ACHIEVEMENT = "achievement"
    PROJECT = "project"


class Milestone(Base):
    """Career history entry, entered manually or materialized from a parsed resume"""
    __tablename__ = "milestones"
    __table_args__ = (
        Index("idx_milestones_user_start", "user_id", "start_date"),
        Index("idx_milestones_user_type", "user_id", "type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    type = Column(SQLEnum(MilestoneType), nullable=False, default=MilestoneType.JOB)
    company = Column(String(200), nullable=True)
    location = Column(String(200), nullable=True)
    url = Column(String(500), nullable=True)

    # Calendar dates; resumes rarely carry more than month precision
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)

    skills = Column(JSON, default=list)
    technologies = Column(JSON, default=list)

    # Provenance
    is_manually_added = Column(Boolean, default=False)
    source_document_id = Column(
        Integer, ForeignKey("resume_documents.id", ondelete="CASCADE"), nullable=True, index=True
    )
    confidence = Column(Integer, default=100)  # 0-100

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="milestones")
