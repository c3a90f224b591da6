"""
Timeline Router - milestone CRUD and analytics
"""
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import Milestone, MilestoneType, User
from ..schemas.milestone import (
    MilestoneCreate, MilestoneUpdate, MilestoneResponse, MilestoneListResponse, TimelineAnalytics
)
from ..services.auth import get_current_user
from ..services.timeline_analyzer import build_timeline_analytics

router = APIRouter(prefix="/api/timeline", tags=["Timeline"])


async def get_user_milestone(db: AsyncSession, user_id: int, milestone_id: int) -> Milestone:
    result = await db.execute(
        select(Milestone).where(Milestone.id == milestone_id, Milestone.user_id == user_id)
    )
    milestone = result.scalar_one_or_none()
    if not milestone:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Milestone not found"
        )
    return milestone


@router.get("/milestones", response_model=MilestoneListResponse)
async def list_milestones(
    type: Optional[str] = Query(None, description="Milestone type, or 'all'"),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Current user's milestones, most recent start date first."""
    filters = [Milestone.user_id == current_user.id]
    if type and type != "all":
        try:
            filters.append(Milestone.type == MilestoneType(type))
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown milestone type: {type}"
            )

    total = (await db.execute(select(func.count(Milestone.id)).where(*filters))).scalar_one()
    result = await db.execute(
        select(Milestone)
        .where(*filters)
        .order_by(Milestone.start_date.desc(), Milestone.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )

    return MilestoneListResponse(
        data=[MilestoneResponse.model_validate(m) for m in result.scalars().all()],
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit)
    )


@router.post("/milestones", response_model=MilestoneResponse, status_code=status.HTTP_201_CREATED)
async def create_milestone(
    data: MilestoneCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if data.end_date and data.end_date < data.start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="End date cannot be before start date"
        )

    milestone = Milestone(
        **data.model_dump(),
        user_id=current_user.id,
        is_manually_added=True,
        confidence=100
    )
    db.add(milestone)
    await db.commit()
    await db.refresh(milestone)
    return milestone


@router.put("/milestones/{milestone_id}", response_model=MilestoneResponse)
async def update_milestone(
    milestone_id: int,
    data: MilestoneUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    milestone = await get_user_milestone(db, current_user.id, milestone_id)

    # Update fields that were provided
    update_dict = data.model_dump(exclude_unset=True)
    # Only a date change is validated; extracted rows may already carry inverted dates
    if "start_date" in update_dict or "end_date" in update_dict:
        start_date = update_dict.get("start_date") or milestone.start_date
        end_date = update_dict.get("end_date", milestone.end_date)
        if end_date and end_date < start_date:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="End date cannot be before start date"
            )

    for field, value in update_dict.items():
        if field == "start_date" and value is None:
            continue
        setattr(milestone, field, value)

    await db.commit()
    await db.refresh(milestone)
    return milestone


@router.delete("/milestones/{milestone_id}")
async def delete_milestone(
    milestone_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    milestone = await get_user_milestone(db, current_user.id, milestone_id)
    await db.delete(milestone)
    await db.commit()
    return {"message": "Milestone deleted"}


@router.get("/analytics", response_model=TimelineAnalytics)
async def get_timeline_analytics(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Gaps, skill frequency and histograms computed from the current milestones."""
    result = await db.execute(
        select(Milestone).where(Milestone.user_id == current_user.id)
    )
    return build_timeline_analytics(result.scalars().all())
