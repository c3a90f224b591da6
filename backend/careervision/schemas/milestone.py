"""
Timeline schemas: milestone CRUD payloads and analytics view
"""
from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import date, datetime

from ..models.milestone import MilestoneType


class MilestoneBase(BaseModel):
    title: str = Field(..., min_length=2, max_length=200)
    description: str = Field(..., min_length=10, max_length=1000)
    type: MilestoneType
    company: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    url: Optional[str] = Field(None, max_length=500)
    start_date: date
    end_date: Optional[date] = None
    skills: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)


class MilestoneCreate(MilestoneBase):
    pass


class MilestoneUpdate(BaseModel):
    """Partial update; type is fixed at creation"""
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    description: Optional[str] = Field(None, min_length=10, max_length=1000)
    company: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    url: Optional[str] = Field(None, max_length=500)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    skills: Optional[List[str]] = None
    technologies: Optional[List[str]] = None


class MilestoneResponse(BaseModel):
    id: int
    user_id: int
    title: str
    # Materialized milestones may carry short or empty descriptions
    description: str = ""
    type: MilestoneType
    company: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    skills: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    is_manually_added: bool = False
    source_document_id: Optional[int] = None
    confidence: int = 100
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MilestoneListResponse(BaseModel):
    data: List[MilestoneResponse]
    page: int
    limit: int
    total: int
    pages: int


# ============================================================================
# Analytics
# ============================================================================

class CareerGap(BaseModel):
    start_date: date
    end_date: date
    duration_months: int
    before_milestone_title: str
    after_milestone_title: str


class TypeCount(BaseModel):
    type: str
    count: int


class YearCount(BaseModel):
    year: int
    count: int


class SkillCount(BaseModel):
    skill: str
    count: int


class TimelineAnalytics(BaseModel):
    milestones_by_type: List[TypeCount] = Field(default_factory=list)
    milestones_by_year: List[YearCount] = Field(default_factory=list)
    career_gaps: List[CareerGap] = Field(default_factory=list)
    top_skills: List[SkillCount] = Field(default_factory=list)
    total_milestones: int = 0
