"""Split resume text into lines and locate sections by heading keywords."""
from typing import Dict, Iterable, List, Sequence, Tuple

# Heading vocabulary per section (lowercase; matched as substrings)
SECTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "experience": ("experience", "employment", "work history"),
    "education": ("education", "academic background", "qualifications"),
    "skills": ("skills", "competencies"),
    "projects": ("projects", "portfolio"),
    "certifications": ("certifications", "certificates", "licenses"),
    "summary": ("summary", "objective", "profile", "about"),
}

# Sections whose headings close whatever section is open.
# Summary words ("profile", "about") show up in body text too often to terminate.
TERMINATING_SECTIONS = ("experience", "education", "skills", "projects", "certifications")


def to_lines(text: str) -> List[str]:
    """Split on line breaks, trim, drop blank lines. Order is preserved."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def line_matches(line: str, keywords: Iterable[str]) -> bool:
    lower = line.lower()
    return any(keyword in lower for keyword in keywords)


def _terminators_for(keywords: Sequence[str]) -> List[str]:
    own = set(keywords)
    terminators = []
    for section in TERMINATING_SECTIONS:
        section_keywords = SECTION_KEYWORDS[section]
        if own.intersection(section_keywords):
            continue
        terminators.extend(section_keywords)
    return terminators


def find_section(lines: Sequence[str], keywords: Sequence[str]) -> Tuple[int, int]:
    """
    Locate the half-open range [start, end) of a section.

    start is the first line containing any of `keywords`; end is the first
    later line containing another section's heading keyword, or len(lines).
    Returns (0, 0) when no heading matches.
    """
    start = next((i for i, line in enumerate(lines) if line_matches(line, keywords)), None)
    if start is None:
        return 0, 0

    terminators = _terminators_for(keywords)
    for i in range(start + 1, len(lines)):
        if line_matches(lines[i], terminators):
            return start, i
    return start, len(lines)


def section_body(lines: Sequence[str], section: str) -> List[str]:
    """Lines of a named section, excluding its heading line."""
    start, end = find_section(lines, SECTION_KEYWORDS[section])
    if end <= start:
        return []
    return list(lines[start + 1:end])
