"""
Heuristic field extractors for resume text.

Each extractor takes the resume's line sequence (and the full text, which
only the skill matcher needs) and returns a typed value. A heuristic miss
always yields an empty default; none of these raise for empty input.
"""
import re
from typing import Callable, Dict, List, Optional, Sequence

from ..schemas.resume import (
    PersonalInfo, ExperienceEntry, EducationEntry, CertificationEntry, ProjectEntry
)
from .dates import find_date_tokens, find_year, has_date, line_date
from .segmenter import SECTION_KEYWORDS, find_section, line_matches

# ============================================================================
# Patterns and Vocabularies
# ============================================================================

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LOCATION_RE = re.compile(r"\b[A-Z][a-zA-Z]+(?:[ .][A-Z][a-zA-Z]+)*,\s*[A-Z]{2}\b")
NAME_RE = re.compile(r"[A-Z][a-zA-Z'\-]+(?:\s+[A-Z][a-zA-Z'\-]+){1,3}")
URL_RE = re.compile(r"https?://[^\s,;)]+")
GPA_RE = re.compile(r"\bgpa\b[:\s]*([0-9]+(?:\.[0-9]+)?(?:\s*/\s*[0-9]+(?:\.[0-9]+)?)?)", re.IGNORECASE)
COMPANY_SPLIT_RE = re.compile(r"\s*[-\u2013|@]\s*")

SKILL_VOCABULARY = [
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "php", "ruby", "go",
    "rust", "kotlin", "swift", "scala", "sql", "html", "css",
    # Frameworks
    "react", "angular", "vue", "node.js", "express", "django", "flask", "fastapi",
    "spring", "rails", ".net", "tensorflow", "pytorch",
    # Databases
    "mysql", "postgresql", "mongodb", "redis", "sqlite", "elasticsearch",
    # Cloud platforms
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform",
    # Tools
    "git", "jenkins", "jira", "linux", "figma", "photoshop", "excel",
    # Soft skills
    "leadership", "communication", "teamwork", "problem solving",
    "project management", "agile", "scrum",
]

DEGREE_KEYWORDS = ("bachelor", "master", "phd", "degree", "diploma", "certificate")

SUMMARY_MAX_CHARS = 500
SUMMARY_HEADING_LINES = 4
SUMMARY_FALLBACK_LINES = 3
SUMMARY_FALLBACK_MIN_CHARS = 20


def _first_match(pattern: "re.Pattern", lines: Sequence[str]) -> Optional[str]:
    for line in lines:
        m = pattern.search(line)
        if m:
            return m.group(0).strip()
    return None


def _next_line(lines: Sequence[str], index: int, end: int) -> str:
    return lines[index + 1] if index + 1 < end else ""


# ============================================================================
# Extractors
# ============================================================================

def extract_personal_info(lines: Sequence[str], text: str = "") -> PersonalInfo:
    """First match wins for each of email, phone and location."""
    info = PersonalInfo(
        email=_first_match(EMAIL_RE, lines),
        phone=_first_match(PHONE_RE, lines),
        location=_first_match(LOCATION_RE, lines),
    )
    if lines:
        first = lines[0]
        all_keywords = [k for keywords in SECTION_KEYWORDS.values() for k in keywords]
        if NAME_RE.fullmatch(first) and not line_matches(first, all_keywords):
            info.name = first
    return info


def extract_skills(lines: Sequence[str], text: str = "") -> List[str]:
    """Vocabulary entries occurring anywhere in the text (case-insensitive substring), deduplicated."""
    haystack = (text or "\n".join(lines)).lower()
    if not haystack:
        return []
    found = []
    for skill in SKILL_VOCABULARY:
        if skill not in found and skill in haystack:
            found.append(skill)
    return found


def extract_experience(lines: Sequence[str], text: str = "") -> List[ExperienceEntry]:
    """
    A dated line opens an entry; the line before it is the job title and
    following undated lines are its description.
    """
    start, end = find_section(lines, SECTION_KEYWORDS["experience"])
    if end <= start:
        return []

    entries: List[ExperienceEntry] = []
    current: Optional[ExperienceEntry] = None
    description: List[tuple] = []  # (line index, text)

    def close_entry():
        if current is None:
            return
        current.description = " ".join(line for _, line in description)
        current.skills = extract_skills([], f"{current.title}\n{current.description}")
        entries.append(current)

    for i in range(start + 1, end):
        line = lines[i]
        if not has_date(line):
            if current is not None:
                description.append((i, line))
            continue

        # The title line belongs to the new entry, not the previous description
        if description and description[-1][0] == i - 1:
            description.pop()
        close_entry()

        segments = COMPANY_SPLIT_RE.split(line)
        company = segments[1].strip() if len(segments) > 1 and segments[1].strip() else "Unknown Company"
        current = ExperienceEntry(
            title=lines[i - 1] if i - 1 > start else "",
            company=company,
            start_date=line_date(line, "start"),
            end_date=line_date(line, "end"),
        )
        description = []

    close_entry()
    return entries


def extract_education(lines: Sequence[str], text: str = "") -> List[EducationEntry]:
    start, end = find_section(lines, SECTION_KEYWORDS["education"])
    if end <= start:
        return []

    entries = []
    for i in range(start + 1, end):
        line = lines[i]
        if not any(keyword in line.lower() for keyword in DEGREE_KEYWORDS):
            continue

        window = lines[i + 1:min(i + 4, end)]
        end_date = None
        for candidate in window:
            end_date = find_year(candidate)
            if end_date:
                break

        gpa = ""
        for candidate in (line, *window):
            gpa_match = GPA_RE.search(candidate)
            if gpa_match:
                gpa = gpa_match.group(1)
                break

        entries.append(EducationEntry(
            degree=line,
            institution=_next_line(lines, i, end),
            end_date=end_date,
            gpa=gpa,
        ))
    return entries


def extract_certifications(lines: Sequence[str], text: str = "") -> List[CertificationEntry]:
    start, end = find_section(lines, SECTION_KEYWORDS["certifications"])
    if end <= start:
        return []

    entries = []
    for i in range(start + 1, end):
        line = lines[i]
        if len(line) <= 5:
            continue
        next_line = _next_line(lines, i, end)
        combined = f"{line} {next_line}"
        dates = [d for d in find_date_tokens(combined) if d is not None]
        url = URL_RE.search(combined)
        entries.append(CertificationEntry(
            name=line,
            issuer=next_line if next_line and len(next_line) < 50 else "Unknown",
            date=dates[0] if dates else None,
            url=url.group(0) if url else "",
        ))
    return entries


def extract_projects(lines: Sequence[str], text: str = "") -> List[ProjectEntry]:
    start, end = find_section(lines, SECTION_KEYWORDS["projects"])
    if end <= start:
        return []

    entries = []
    for i in range(start + 1, end):
        line = lines[i]
        if len(line) <= 5:
            continue
        next_line = _next_line(lines, i, end)
        combined = f"{line} {next_line}"
        url = URL_RE.search(combined)
        entries.append(ProjectEntry(
            name=line,
            description=next_line if len(next_line) > 20 else "",
            technologies=extract_skills([], combined),
            url=url.group(0) if url else "",
        ))
    return entries


def extract_summary(lines: Sequence[str], text: str = "") -> str:
    """
    Lines after a summary/objective/profile/about heading; otherwise the
    first few long lines of the resume.
    """
    heading = next(
        (i for i, line in enumerate(lines) if line_matches(line, SECTION_KEYWORDS["summary"])),
        None,
    )
    if heading is not None:
        following = lines[heading + 1:heading + 1 + SUMMARY_HEADING_LINES]
        summary = " ".join(following).strip()
        if summary:
            return summary[:SUMMARY_MAX_CHARS]

    long_lines = [line for line in lines if len(line) > SUMMARY_FALLBACK_MIN_CHARS]
    return " ".join(long_lines[:SUMMARY_FALLBACK_LINES])[:SUMMARY_MAX_CHARS]


# ExtractedProfile field -> extractor
FIELD_EXTRACTORS: Dict[str, Callable] = {
    "personal_info": extract_personal_info,
    "summary": extract_summary,
    "skills": extract_skills,
    "experience": extract_experience,
    "education": extract_education,
    "certifications": extract_certifications,
    "projects": extract_projects,
}
