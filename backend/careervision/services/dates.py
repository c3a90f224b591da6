"""Parse resume dates: bare years, M/YYYY and month-name + year."""
import re
from datetime import date
from typing import List, Optional, Tuple

MONTHS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

DATE_TOKEN_RE = re.compile(
    r"\b(?:"
    r"(?P<month_num>0?[1-9]|1[0-2])/(?P<slash_year>(?:19|20)\d{2})"
    r"|(?:(?P<month_name>"
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
    r")\.?\s+)?"
    r"(?P<year>(?:19|20)\d{2})"
    r")\b",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
ONGOING_RE = re.compile(r"\b(?:present|current|now|today)\b", re.IGNORECASE)


def _month_num(mon_str: str) -> int:
    s = mon_str.lower()[:3]
    return MONTHS.index(s) + 1


def parse_date_token(match: "re.Match") -> Optional[date]:
    """First day of the token's month, or January 1 when only a year is known."""
    try:
        if match.group("slash_year"):
            return date(int(match.group("slash_year")), int(match.group("month_num")), 1)
        month = _month_num(match.group("month_name")) if match.group("month_name") else 1
        return date(int(match.group("year")), month, 1)
    except (ValueError, TypeError):
        return None


def find_date_tokens(text: str) -> List[Optional[date]]:
    """All date tokens in order; unparsable ones come back as None."""
    if not text:
        return []
    return [parse_date_token(m) for m in DATE_TOKEN_RE.finditer(text)]


def has_date(text: str) -> bool:
    return bool(text) and DATE_TOKEN_RE.search(text) is not None


def line_date(line: str, position: str = "start") -> Optional[date]:
    """
    Pick the start or end date out of a line.

    One token serves both positions, unless the line marks the role as
    ongoing ("2021 - Present"), in which case there is no end. With two or
    more tokens the first is the start and the second the end.
    """
    tokens = find_date_tokens(line)
    if not tokens:
        return None
    if len(tokens) == 1:
        if position == "end" and ONGOING_RE.search(line):
            return None
        return tokens[0]
    return tokens[0] if position == "start" else tokens[1]


def line_dates(line: str) -> Tuple[Optional[date], Optional[date]]:
    return line_date(line, "start"), line_date(line, "end")


def find_year(text: str) -> Optional[date]:
    """January 1 of the first 4-digit year in text."""
    m = YEAR_RE.search(text or "")
    if not m:
        return None
    return date(int(m.group(0)), 1, 1)
