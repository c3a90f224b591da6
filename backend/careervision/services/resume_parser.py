"""
Resume Parser Service - heuristic, line-oriented extraction of career data.
Composes the segmenter and field extractors into one parse call.
"""
import logging
from typing import Callable, Mapping

from ..schemas.resume import ExtractedProfile
from .field_extractors import FIELD_EXTRACTORS
from .segmenter import to_lines

logger = logging.getLogger(__name__)


def parse_resume(raw_text: str, extractors: Mapping[str, Callable] = FIELD_EXTRACTORS) -> ExtractedProfile:
    """
    Parse plain resume text into an ExtractedProfile.

    Blank input gives an all-empty profile. Each field extractor runs on its
    own: one that raises leaves its field at the default and the error is
    recorded in `extraction_errors`, while the others still contribute.
    """
    profile = ExtractedProfile()
    if not raw_text or not raw_text.strip():
        return profile

    lines = to_lines(raw_text)
    values = {}
    for field, extractor in extractors.items():
        try:
            values[field] = extractor(lines, raw_text)
        except Exception as e:
            logger.warning("Resume field extractor %r failed: %s", field, e)
            profile.extraction_errors[field] = str(e)[:500]

    for field, value in values.items():
        setattr(profile, field, value)

    logger.info(
        "Parsed resume: %d exp, %d edu, %d certs, %d projects, %d skills",
        len(profile.experience), len(profile.education), len(profile.certifications),
        len(profile.projects), len(profile.skills)
    )
    return profile
