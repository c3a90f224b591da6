"""
Q&A Router - career assistant questions, history and answer ratings
"""
import math

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import Question, User
from ..schemas.question import (
    QuestionAsk, AnswerResponse, QuestionResponse, QuestionHistoryResponse, AnswerRating
)
from ..services.auth import get_current_user
from ..services.career_assistant import CareerAssistant

router = APIRouter(prefix="/api/qna", tags=["Career Assistant"])


def get_career_assistant(request: Request) -> CareerAssistant:
    return CareerAssistant(request.app.state.intent_classifier)


@router.post("/ask", response_model=AnswerResponse)
async def ask_question(
    data: QuestionAsk,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
    assistant: CareerAssistant = Depends(get_career_assistant)
):
    record = await assistant.ask(db, current_user.id, data.question)
    return AnswerResponse(
        question_id=record.id,
        answer=record.answer,
        category=record.category,
        intent=record.intent,
        confidence=record.confidence
    )


@router.get("/history", response_model=QuestionHistoryResponse)
async def get_question_history(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Previously asked questions, newest first."""
    total = (await db.execute(
        select(func.count(Question.id)).where(Question.user_id == current_user.id)
    )).scalar_one()
    result = await db.execute(
        select(Question)
        .where(Question.user_id == current_user.id)
        .order_by(Question.created_at.desc(), Question.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    return QuestionHistoryResponse(
        data=[QuestionResponse.model_validate(q) for q in result.scalars().all()],
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit)
    )


@router.patch("/{question_id}/rate", response_model=QuestionResponse)
async def rate_answer(
    question_id: int,
    rating: AnswerRating,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    result = await db.execute(
        select(Question).where(Question.id == question_id, Question.user_id == current_user.id)
    )
    question = result.scalar_one_or_none()
    if not question:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found"
        )

    question.helpful = rating.helpful
    await db.commit()
    await db.refresh(question)
    return question
