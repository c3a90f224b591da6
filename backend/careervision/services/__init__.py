from .text_extractor import (
    extract_text, media_type_for_mime,
    TextExtractionError, UnsupportedFormatError, ExtractionFailureError
)
from .resume_parser import parse_resume
from .milestone_materializer import build_milestones, materialize_milestones, MaterializationResult
from .timeline_analyzer import build_timeline_analytics, detect_career_gaps, skill_frequency
from .resume_processing import ResumeProcessingQueue
from .intent_classifier import NearestNeighbourIntentClassifier, IntentPrediction
from .career_assistant import CareerAssistant, AssistantReply, INTENT_HANDLERS

__all__ = [
    # Resume pipeline
    "extract_text", "media_type_for_mime",
    "TextExtractionError", "UnsupportedFormatError", "ExtractionFailureError",
    "parse_resume", "build_milestones", "materialize_milestones", "MaterializationResult",
    "ResumeProcessingQueue",
    # Timeline
    "build_timeline_analytics", "detect_career_gaps", "skill_frequency",
    # Career assistant
    "NearestNeighbourIntentClassifier", "IntentPrediction",
    "CareerAssistant", "AssistantReply", "INTENT_HANDLERS",
]
