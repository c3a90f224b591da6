"""
Resume schemas: parser output and resume document responses
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
import datetime as dt

from ..models.resume import ResumeProcessingStatus


# ============================================================================
# Parser Output
# ============================================================================

class PersonalInfo(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None


class ExperienceEntry(BaseModel):
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    description: str = ""
    skills: List[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    degree: str = ""
    institution: str = ""
    location: str = ""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    gpa: str = ""


class CertificationEntry(BaseModel):
    name: str = ""
    issuer: str = ""
    date: Optional[dt.date] = None
    url: str = ""


class ProjectEntry(BaseModel):
    name: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    url: str = ""


class ExtractedProfile(BaseModel):
    """Complete parse result. Every field defaults to empty rather than failing."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    # field name -> error message for extractors that raised
    extraction_errors: Dict[str, str] = Field(default_factory=dict)


# ============================================================================
# Resume Document Responses
# ============================================================================

class ResumeUploadResponse(BaseModel):
    resume_id: int
    filename: str
    status: str = "processing"
    message: str = "Resume saved. Parsing in background - check status in a few seconds."


class ResumeSummaryResponse(BaseModel):
    id: int
    original_name: str
    file_size: int
    mime_type: str
    status: ResumeProcessingStatus
    error_message: Optional[str] = None
    milestones_created: int = 0
    created_at: Optional[dt.datetime] = None
    completed_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class ResumeDetailResponse(ResumeSummaryResponse):
    extracted_text: Optional[str] = None
    extracted_data: Optional[ExtractedProfile] = None
    started_at: Optional[dt.datetime] = None
