"""
Career assistant - answers free-text questions about the user's own timeline.

A question is classified into one of the known intents, the matching handler
builds an answer from the user's milestones, and the exchange is stored as a
Question row so it shows up in history and can be rated.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Milestone, MilestoneType, Question, QuestionCategory
from .intent_classifier import (
    INTENT_COURSES, INTENT_GAPS, INTENT_JOBS, INTENT_SKILLS,
    IntentClassifier
)
from .recommendations import generate_course_recommendations, generate_job_recommendations
from .timeline_analyzer import detect_career_gaps, skill_frequency, sort_jobs

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = (
    "I'm sorry, I couldn't understand your question. Could you please rephrase it "
    "or ask about career gaps, skills, job matches, or course recommendations?"
)
FALLBACK_CONFIDENCE_FLOOR = 20.0
TOP_SKILLS_IN_ANSWER = 5


@dataclass
class AssistantReply:
    answer: str
    category: QuestionCategory
    context: Dict[str, Any] = field(default_factory=dict)


async def _user_milestones(db: AsyncSession, user_id: int, milestone_type: Optional[MilestoneType] = None) -> List[Milestone]:
    query = select(Milestone).where(Milestone.user_id == user_id)
    if milestone_type is not None:
        query = query.where(Milestone.type == milestone_type)
    result = await db.execute(query.order_by(Milestone.start_date))
    return list(result.scalars().all())


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


async def answer_career_gaps(db: AsyncSession, user_id: int) -> AssistantReply:
    jobs = sort_jobs(await _user_milestones(db, user_id, MilestoneType.JOB))
    if not jobs:
        return AssistantReply(
            answer="I don't see any job experiences in your timeline yet. "
                   "Upload your resume to get a detailed analysis.",
            category=QuestionCategory.CAREER_GAP,
            context={"milestones": []}
        )

    gaps = detect_career_gaps(jobs)
    if not gaps:
        answer = ("Great news! I don't see any significant career gaps in your timeline. "
                  "Your career progression appears continuous.")
    else:
        lines = [f"I found {_plural(len(gaps), 'career gap')} in your timeline:", ""]
        for index, gap in enumerate(gaps, 1):
            lines.append(
                f'{index}. {_plural(gap.duration_months, "month")} gap between '
                f'"{gap.before_milestone_title}" and "{gap.after_milestone_title}"'
            )
        lines.append("")
        lines.append("Consider highlighting any freelance work, courses, or personal projects "
                     "during these periods to strengthen your profile.")
        answer = "\n".join(lines)

    return AssistantReply(
        answer=answer,
        category=QuestionCategory.CAREER_GAP,
        context={"milestones": [m.id for m in jobs], "gaps": len(gaps)}
    )


async def answer_skills(db: AsyncSession, user_id: int) -> AssistantReply:
    milestones = await _user_milestones(db, user_id)
    if not milestones:
        return AssistantReply(
            answer="I don't have enough information about your skills yet. Please upload "
                   "your resume or add more milestones to your timeline.",
            category=QuestionCategory.SKILLS,
            context={"skills": []}
        )

    ranked = skill_frequency(milestones)
    if not ranked:
        return AssistantReply(
            answer="I don't see specific skills listed in your milestones. Consider adding "
                   "skills to your experiences and projects for better analysis.",
            category=QuestionCategory.SKILLS,
            context={"skills": []}
        )

    lines = ["Based on your timeline, here are your key skills:", "", "Top Skills:"]
    for index, (skill, count) in enumerate(ranked[:TOP_SKILLS_IN_ANSWER], 1):
        lines.append(f"{index}. {skill} (mentioned {_plural(count, 'time')})")
    if len(ranked) > TOP_SKILLS_IN_ANSWER:
        lines.append("")
        lines.append("Other Skills:")
        lines.extend(f"- {skill}" for skill, _ in ranked[TOP_SKILLS_IN_ANSWER:])

    return AssistantReply(
        answer="\n".join(lines),
        category=QuestionCategory.SKILLS,
        context={
            "skills": [skill for skill, _ in ranked],
            "experience": _plural(len(milestones), "milestone"),
        }
    )


async def answer_job_matches(db: AsyncSession, user_id: int) -> AssistantReply:
    skills = [skill for skill, _ in skill_frequency(await _user_milestones(db, user_id))]
    jobs = generate_job_recommendations(skills)

    noun = "job opportunity" if len(jobs) == 1 else "job opportunities"
    lines = [f"I found {len(jobs)} {noun} that match your profile:", ""]
    for index, job in enumerate(jobs, 1):
        lines.append(f"{index}. {job.title} at {job.company}")
        lines.append(f"   {job.location} | Match: {job.match_score}%")
        lines.append(f"   {', '.join(job.skills[:3])}")
    lines.append("")
    lines.append("Check the Recommendations page for more details.")

    average = round(sum(j.match_score for j in jobs) / len(jobs)) if jobs else 0
    return AssistantReply(
        answer="\n".join(lines),
        category=QuestionCategory.RECOMMENDATIONS,
        context={"recommendations": len(jobs), "average_match": average}
    )


async def answer_course_recommendations(db: AsyncSession, user_id: int) -> AssistantReply:
    skills = [skill for skill, _ in skill_frequency(await _user_milestones(db, user_id))]
    courses = generate_course_recommendations(skills)

    lines = [f"Here are {_plural(len(courses), 'course')} I recommend for your career growth:", ""]
    for index, course in enumerate(courses, 1):
        lines.append(f"{index}. {course.title}")
        lines.append(f"   {course.provider} | Level: {course.level}")
        lines.append(f"   Duration: {course.duration} | Match: {course.match_score}%"
                     + (" | Free" if course.free else ""))
    lines.append("")
    lines.append("These courses will help you develop new skills and advance your career.")

    return AssistantReply(
        answer="\n".join(lines),
        category=QuestionCategory.RECOMMENDATIONS,
        context={
            "recommendations": len(courses),
            "levels": sorted({c.level for c in courses}),
        }
    )


IntentHandler = Callable[[AsyncSession, int], Awaitable[AssistantReply]]

INTENT_HANDLERS: Dict[str, IntentHandler] = {
    INTENT_GAPS: answer_career_gaps,
    INTENT_SKILLS: answer_skills,
    INTENT_JOBS: answer_job_matches,
    INTENT_COURSES: answer_course_recommendations,
}


class CareerAssistant:
    def __init__(self, classifier: IntentClassifier, handlers: Optional[Dict[str, IntentHandler]] = None):
        self.classifier = classifier
        self.handlers = handlers if handlers is not None else INTENT_HANDLERS

    async def ask(self, db: AsyncSession, user_id: int, question: str) -> Question:
        """Classify, answer and persist one question. Returns the stored row."""
        started = time.perf_counter()
        prediction = self.classifier.classify(question)
        confidence = round(prediction.confidence * 100, 2)

        handler = self.handlers.get(prediction.intent) if prediction.intent else None
        if handler is None:
            reply = AssistantReply(answer=FALLBACK_ANSWER, category=QuestionCategory.GENERAL)
            confidence = max(FALLBACK_CONFIDENCE_FLOOR, confidence)
        else:
            reply = await handler(db, user_id)

        record = Question(
            user_id=user_id,
            question=question,
            answer=reply.answer,
            category=reply.category,
            intent=prediction.intent if handler is not None else None,
            confidence=confidence,
            context=reply.context,
            processing_time_ms=int((time.perf_counter() - started) * 1000),
        )
        db.add(record)
        await db.commit()
        await db.refresh(record)

        logger.info(
            "Answered question %s for user %s (intent=%s, confidence=%.1f)",
            record.id, user_id, record.intent, confidence
        )
        return record
