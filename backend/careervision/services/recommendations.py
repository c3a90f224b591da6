"""
Mock job and course recommendations.

There is no job board or course catalogue integration yet; suggestions are
generated from a small fixed catalogue ranked by overlap with the user's
top skills.
"""
from typing import List, Sequence

from ..schemas.question import CourseRecommendation, JobRecommendation

MAX_RECOMMENDATIONS = 5

# (title, company, location, skills)
_JOB_CATALOG = [
    ("Backend Engineer", "Northwind Labs", "Remote", ["python", "django", "postgresql", "docker"]),
    ("Full Stack Developer", "Contoso", "Austin, TX", ["javascript", "react", "node.js", "mongodb"]),
    ("Cloud Engineer", "Fabrikam", "Seattle, WA", ["aws", "terraform", "kubernetes", "docker"]),
    ("Data Engineer", "Tailspin Data", "New York, NY", ["python", "sql", "aws", "git"]),
    ("Frontend Engineer", "Adventure Works", "Remote", ["typescript", "react", "css", "html"]),
    ("Java Developer", "Litware", "Chicago, IL", ["java", "spring", "mysql", "jenkins"]),
    ("Engineering Manager", "Wide World Importers", "Boston, MA", ["leadership", "agile", "communication"]),
]

# (title, provider, level, duration, free, skills)
_COURSE_CATALOG = [
    ("Kubernetes Fundamentals", "Linux Foundation", "beginner", "6 weeks", False, ["kubernetes", "docker"]),
    ("AWS Solutions Architect Prep", "Coursera", "intermediate", "8 weeks", False, ["aws", "terraform"]),
    ("Advanced Python", "edX", "advanced", "5 weeks", True, ["python"]),
    ("React - The Complete Guide", "Udemy", "intermediate", "40 hours", False, ["react", "javascript", "typescript"]),
    ("SQL for Data Analysis", "Khan Academy", "beginner", "3 weeks", True, ["sql", "postgresql", "mysql"]),
    ("Leading Engineering Teams", "LinkedIn Learning", "intermediate", "4 hours", False, ["leadership", "communication", "agile"]),
    ("Git and CI Pipelines", "Coursera", "beginner", "2 weeks", True, ["git", "jenkins"]),
]


def _match_score(user_skills: Sequence[str], skills: Sequence[str]) -> int:
    if not skills:
        return 0
    overlap = len(set(user_skills) & set(skills))
    return round(50 + 50 * overlap / len(skills)) if overlap else 40


def generate_job_recommendations(user_skills: Sequence[str]) -> List[JobRecommendation]:
    user_skills = [s.lower() for s in user_skills]
    jobs = [
        JobRecommendation(
            title=title, company=company, location=location,
            match_score=_match_score(user_skills, skills), skills=skills
        )
        for title, company, location, skills in _JOB_CATALOG
    ]
    jobs.sort(key=lambda j: -j.match_score)
    return jobs[:MAX_RECOMMENDATIONS]


def generate_course_recommendations(user_skills: Sequence[str]) -> List[CourseRecommendation]:
    """Courses teaching skills the user does not list yet rank first."""
    user_skills = [s.lower() for s in user_skills]
    courses = []
    for title, provider, level, duration, free, skills in _COURSE_CATALOG:
        new_skills = [s for s in skills if s not in user_skills]
        score = round(40 + 60 * len(new_skills) / len(skills))
        courses.append(CourseRecommendation(
            title=title, provider=provider, level=level, duration=duration,
            match_score=score, free=free, skills=skills
        ))
    courses.sort(key=lambda c: -c.match_score)
    return courses[:MAX_RECOMMENDATIONS]
