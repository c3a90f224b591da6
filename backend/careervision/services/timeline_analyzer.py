"""
Timeline analytics computed on demand from a user's milestones:
career gaps between jobs, skill frequency, and type / year histograms.
"""
import math
from collections import Counter
from datetime import date, datetime
from typing import Iterable, List, Sequence, Tuple, Union

from ..models import MilestoneType
from ..schemas.milestone import CareerGap, SkillCount, TimelineAnalytics, TypeCount, YearCount

GAP_THRESHOLD_DAYS = 30
DAYS_PER_MONTH = 30
TOP_SKILLS_LIMIT = 10

DateLike = Union[date, datetime]


def _type_value(milestone) -> str:
    milestone_type = milestone.type
    return milestone_type.value if isinstance(milestone_type, MilestoneType) else str(milestone_type)


def _days_between(earlier: DateLike, later: DateLike) -> int:
    """Whole days from earlier to later, rounded up (negative when inverted)."""
    delta = later - earlier
    return math.ceil(delta.total_seconds() / 86400)


def sort_jobs(milestones: Iterable) -> List:
    """Job milestones that have a start date, ascending by start date."""
    jobs = [m for m in milestones if _type_value(m) == MilestoneType.JOB.value and m.start_date]
    return sorted(jobs, key=lambda m: m.start_date)


def detect_career_gaps(milestones: Iterable) -> List[CareerGap]:
    """
    Gaps of more than 30 days between consecutive jobs.

    Jobs are compared in start-date order. A pair where the earlier job has
    no end date (still ongoing, or unknown) is skipped rather than measured
    against today. Overlapping or inverted ranges produce a non-positive
    gap and are never reported.
    """
    jobs = sort_jobs(milestones)
    gaps = []
    for prev, curr in zip(jobs, jobs[1:]):
        if not prev.end_date or not curr.start_date:
            continue
        gap_days = _days_between(prev.end_date, curr.start_date)
        if gap_days > GAP_THRESHOLD_DAYS:
            gaps.append(CareerGap(
                start_date=prev.end_date,
                end_date=curr.start_date,
                duration_months=gap_days // DAYS_PER_MONTH,
                before_milestone_title=prev.title,
                after_milestone_title=curr.title,
            ))
    return gaps


def skill_frequency(milestones: Iterable, top_n: int = TOP_SKILLS_LIMIT) -> List[Tuple[str, int]]:
    """
    Count skills and technologies (case-folded) across milestones.
    Each milestone counts a skill once; ties keep first-seen order.
    """
    counts: Counter = Counter()
    for milestone in milestones:
        seen = []
        for skill in list(milestone.skills or []) + list(milestone.technologies or []):
            key = skill.strip().lower()
            if key and key not in seen:
                seen.append(key)
        counts.update(seen)
    # sorted() is stable, so equal counts stay in insertion order
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return ranked[:top_n]


def milestones_by_type(milestones: Iterable) -> List[Tuple[str, int]]:
    counts = Counter(_type_value(m) for m in milestones)
    return sorted(counts.items(), key=lambda item: -item[1])


def milestones_by_year(milestones: Iterable) -> List[Tuple[int, int]]:
    counts = Counter(m.start_date.year for m in milestones if m.start_date)
    return sorted(counts.items())


def build_timeline_analytics(milestones: Sequence) -> TimelineAnalytics:
    """Read-only analytics view for one user's current milestones."""
    milestones = list(milestones)
    return TimelineAnalytics(
        milestones_by_type=[TypeCount(type=t, count=c) for t, c in milestones_by_type(milestones)],
        milestones_by_year=[YearCount(year=y, count=c) for y, c in milestones_by_year(milestones)],
        career_gaps=detect_career_gaps(milestones),
        top_skills=[SkillCount(skill=s, count=c) for s, c in skill_frequency(milestones)],
        total_milestones=len(milestones),
    )
