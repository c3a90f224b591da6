from datetime import date
from types import SimpleNamespace

from careervision.models import MilestoneType
from careervision.services.timeline_analyzer import (
    build_timeline_analytics, detect_career_gaps, milestones_by_type, milestones_by_year,
    skill_frequency
)


def milestone(title, start, end=None, type=MilestoneType.JOB, skills=(), technologies=()):
    return SimpleNamespace(
        title=title, type=type, start_date=start, end_date=end,
        skills=list(skills), technologies=list(technologies)
    )


def test_gap_between_jobs():
    jobs = [
        milestone("Engineer", date(2019, 1, 1), date(2021, 12, 1)),
        milestone("Junior", date(2016, 1, 1), date(2018, 1, 1)),
    ]
    [gap] = detect_career_gaps(jobs)
    assert gap.start_date == date(2018, 1, 1)
    assert gap.end_date == date(2019, 1, 1)
    assert gap.duration_months == 12
    assert gap.before_milestone_title == "Junior"
    assert gap.after_milestone_title == "Engineer"


def test_gap_months_are_whole_30_day_periods():
    jobs = [
        milestone("A", date(2019, 1, 1), date(2020, 1, 1)),
        milestone("B", date(2020, 3, 31), date(2021, 1, 1)),
    ]
    # 90 days apart
    assert detect_career_gaps(jobs)[0].duration_months == 3


def test_threshold_is_more_than_30_days():
    exactly_30 = [milestone("A", date(2020, 1, 1), date(2020, 6, 1)), milestone("B", date(2020, 7, 1))]
    assert detect_career_gaps(exactly_30) == []

    thirty_one = [milestone("A", date(2020, 1, 1), date(2020, 6, 1)), milestone("B", date(2020, 7, 2))]
    assert detect_career_gaps(thirty_one)[0].duration_months == 1


def test_overlapping_and_open_ended_jobs_have_no_gap():
    jobs = [
        milestone("A", date(2015, 1, 1), None),
        milestone("B", date(2018, 1, 1), date(2020, 1, 1)),
        milestone("C", date(2019, 6, 1), date(2022, 1, 1)),
    ]
    assert detect_career_gaps(jobs) == []


def test_only_jobs_are_considered():
    items = [
        milestone("Job", date(2015, 1, 1), date(2016, 1, 1)),
        milestone("Degree", date(2017, 1, 1), date(2018, 1, 1), type=MilestoneType.EDUCATION),
    ]
    assert detect_career_gaps(items) == []


def test_gap_detection_is_idempotent():
    jobs = [milestone("A", date(2016, 1, 1), date(2018, 1, 1)), milestone("B", date(2019, 1, 1))]
    assert detect_career_gaps(jobs) == detect_career_gaps(jobs)


def test_skill_frequency_counts_each_milestone_once():
    items = [
        milestone("A", date(2020, 1, 1), skills=["Python", "python"], technologies=["Docker"]),
        milestone("B", date(2021, 1, 1), skills=["docker"]),
    ]
    assert skill_frequency(items) == [("docker", 2), ("python", 1)]


def test_skill_frequency_ties_keep_first_seen_order_and_limit():
    items = [milestone("A", date(2020, 1, 1), skills=[f"skill{i}" for i in range(12)])]
    ranked = skill_frequency(items)
    assert len(ranked) == 10
    assert ranked[0] == ("skill0", 1)
    assert skill_frequency(items, top_n=2) == [("skill0", 1), ("skill1", 1)]


def test_histograms():
    items = [
        milestone("A", date(2020, 1, 1)),
        milestone("B", date(2020, 5, 1)),
        milestone("C", date(2018, 1, 1), type=MilestoneType.PROJECT),
    ]
    assert milestones_by_type(items) == [("job", 2), ("project", 1)]
    assert milestones_by_year(items) == [(2018, 1), (2020, 2)]


def test_analytics_view():
    analytics = build_timeline_analytics([
        milestone("A", date(2016, 1, 1), date(2018, 1, 1), skills=["python"]),
        milestone("B", date(2019, 1, 1), skills=["python", "aws"]),
    ])
    assert analytics.total_milestones == 2
    assert len(analytics.career_gaps) == 1
    assert analytics.top_skills[0].skill == "python"
    assert analytics.top_skills[0].count == 2
    assert analytics.milestones_by_type[0].type == "job"


def test_analytics_of_empty_timeline():
    analytics = build_timeline_analytics([])
    assert analytics.total_milestones == 0
    assert analytics.career_gaps == []
    assert analytics.top_skills == []


def test_next_day_start_is_not_a_gap():
    jobs = [milestone("A", date(2020, 1, 1), date(2021, 3, 31)), milestone("B", date(2021, 4, 1))]
    assert detect_career_gaps(jobs) == []
