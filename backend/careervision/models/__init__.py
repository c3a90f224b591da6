from .user import User
from .resume import ResumeDocument, ResumeProcessingStatus
from .milestone import Milestone, MilestoneType
from .question import Question, QuestionCategory

__all__ = [
    "User",
    # Resume documents
    "ResumeDocument", "ResumeProcessingStatus",
    # Timeline
    "Milestone", "MilestoneType",
    # Career assistant
    "Question", "QuestionCategory",
]
