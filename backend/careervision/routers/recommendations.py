"""
Recommendations Router - job and course suggestions from the user's top skills
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import Milestone, User
from ..schemas.question import CourseRecommendation, JobRecommendation
from ..services.auth import get_current_user
from ..services.recommendations import generate_course_recommendations, generate_job_recommendations
from ..services.timeline_analyzer import skill_frequency

router = APIRouter(prefix="/api/recommendations", tags=["Recommendations"])


async def get_top_skills(db: AsyncSession, user_id: int) -> List[str]:
    result = await db.execute(select(Milestone).where(Milestone.user_id == user_id))
    return [skill for skill, _ in skill_frequency(result.scalars().all())]


@router.get("/jobs", response_model=List[JobRecommendation])
async def get_job_recommendations(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return generate_job_recommendations(await get_top_skills(db, current_user.id))


@router.get("/courses", response_model=List[CourseRecommendation])
async def get_course_recommendations(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return generate_course_recommendations(await get_top_skills(db, current_user.id))
