from .resume import (
    PersonalInfo, ExperienceEntry, EducationEntry, CertificationEntry, ProjectEntry,
    ExtractedProfile, ResumeUploadResponse, ResumeSummaryResponse, ResumeDetailResponse
)
from .milestone import (
    MilestoneCreate, MilestoneUpdate, MilestoneResponse, MilestoneListResponse,
    CareerGap, TypeCount, YearCount, SkillCount, TimelineAnalytics
)
from .question import (
    QuestionAsk, AnswerResponse, QuestionResponse, QuestionHistoryResponse, AnswerRating,
    JobRecommendation, CourseRecommendation
)

__all__ = [
    # Resume parsing
    "PersonalInfo", "ExperienceEntry", "EducationEntry", "CertificationEntry", "ProjectEntry",
    "ExtractedProfile", "ResumeUploadResponse", "ResumeSummaryResponse", "ResumeDetailResponse",
    # Timeline
    "MilestoneCreate", "MilestoneUpdate", "MilestoneResponse", "MilestoneListResponse",
    "CareerGap", "TypeCount", "YearCount", "SkillCount", "TimelineAnalytics",
    # Career assistant
    "QuestionAsk", "AnswerResponse", "QuestionResponse", "QuestionHistoryResponse", "AnswerRating",
    "JobRecommendation", "CourseRecommendation",
]
