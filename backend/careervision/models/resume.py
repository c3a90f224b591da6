"""
Resume Document Model - Uploaded resume file plus background processing status.
"""
from enum import Enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ..database import Base


class ResumeProcessingStatus(str, Enum):
    """Status of a resume processing task."""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ResumeDocument(Base):
    """
    An uploaded resume and the outcome of parsing it.
    Status moves pending -> processing -> completed | failed and is
    written back by the background task; clients poll it.
    """
    __tablename__ = "resume_documents"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # File info
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String(120), nullable=False)

    # Status tracking
    status = Column(
        SQLEnum(ResumeProcessingStatus),
        default=ResumeProcessingStatus.PENDING,
        nullable=False
    )
    error_message = Column(Text, nullable=True)

    # Extraction output
    extracted_text = Column(Text, nullable=True)
    extracted_data = Column(JSON, nullable=True)
    milestones_created = Column(Integer, default=0)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="resumes")
