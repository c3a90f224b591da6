"""
Turn a parsed resume into timeline milestones.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Milestone, MilestoneType
from ..schemas.resume import ExtractedProfile

logger = logging.getLogger(__name__)

# Extraction confidence per source field (0-100)
JOB_CONFIDENCE = 85
EDUCATION_CONFIDENCE = 90
CERTIFICATION_CONFIDENCE = 95
PROJECT_CONFIDENCE = 75


@dataclass
class MaterializationResult:
    milestones: List[Milestone] = field(default_factory=list)
    failed: int = 0

    @property
    def created(self) -> int:
        return len(self.milestones)


def _safe_truncate(value: Optional[str], max_len: int) -> Optional[str]:
    """Safely truncate a string to max_len characters."""
    if value is None:
        return None
    return value[:max_len] if len(value) > max_len else value


def build_milestones(
    profile: ExtractedProfile,
    user_id: int,
    source_document_id: Optional[int],
    today: Optional[date] = None,
) -> List[Milestone]:
    """
    Map profile entries to unsaved milestones, in order: jobs, education,
    certifications, projects. Undated entries start `today`.
    """
    today = today or datetime.now(timezone.utc).date()
    milestones = []

    for exp in profile.experience:
        milestones.append(Milestone(
            user_id=user_id,
            title=_safe_truncate(exp.title or "Work Experience", 200),
            description=exp.description or "Professional experience",
            type=MilestoneType.JOB,
            company=_safe_truncate(exp.company or None, 200),
            location=_safe_truncate(exp.location or None, 200),
            start_date=exp.start_date or today,
            end_date=exp.end_date,
            skills=list(exp.skills),
            technologies=[],
            source_document_id=source_document_id,
            confidence=JOB_CONFIDENCE,
        ))

    for edu in profile.education:
        description = f"{edu.degree} from {edu.institution}" if edu.institution else edu.degree
        milestones.append(Milestone(
            user_id=user_id,
            title=_safe_truncate(edu.degree or "Education", 200),
            description=description,
            type=MilestoneType.EDUCATION,
            company=_safe_truncate(edu.institution or None, 200),
            location=_safe_truncate(edu.location or None, 200),
            start_date=edu.start_date or today,
            end_date=edu.end_date,
            skills=[],
            technologies=[],
            source_document_id=source_document_id,
            confidence=EDUCATION_CONFIDENCE,
        ))

    for cert in profile.certifications:
        milestones.append(Milestone(
            user_id=user_id,
            title=_safe_truncate(cert.name or "Certification", 200),
            description=f"Certification from {cert.issuer or 'Unknown'}",
            type=MilestoneType.CERTIFICATION,
            company=_safe_truncate(cert.issuer or None, 200),
            url=_safe_truncate(cert.url or None, 500),
            start_date=cert.date or today,
            skills=[],
            technologies=[],
            source_document_id=source_document_id,
            confidence=CERTIFICATION_CONFIDENCE,
        ))

    for project in profile.projects:
        # Projects carry no dates
        milestones.append(Milestone(
            user_id=user_id,
            title=_safe_truncate(project.name or "Project", 200),
            description=project.description,
            type=MilestoneType.PROJECT,
            url=_safe_truncate(project.url or None, 500),
            start_date=today,
            skills=[],
            technologies=list(project.technologies),
            source_document_id=source_document_id,
            confidence=PROJECT_CONFIDENCE,
        ))

    return milestones


async def materialize_milestones(
    db: AsyncSession,
    profile: ExtractedProfile,
    user_id: int,
    source_document_id: Optional[int],
) -> MaterializationResult:
    """
    Persist one milestone per profile entry.

    Each milestone is committed on its own so a failure on one entry does not
    roll back the ones already saved; failures are logged and counted.
    """
    result = MaterializationResult()

    for milestone in build_milestones(profile, user_id, source_document_id):
        try:
            db.add(milestone)
            await db.commit()
            await db.refresh(milestone)
        except SQLAlchemyError as e:
            logger.warning("Failed to save %s milestone %r: %s", milestone.type, milestone.title, e)
            await db.rollback()
            result.failed += 1
            continue
        # Detach so a later rollback does not expire it
        db.expunge(milestone)
        result.milestones.append(milestone)

    logger.info(
        "Materialized %d milestones for user %s (%d failed)",
        result.created, user_id, result.failed
    )
    return result
