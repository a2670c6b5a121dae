"""
Entity recognisers for résumé lines.

Each function is a pure pattern matcher that returns the first match in
a line or an empty value (``""`` or ``None``).  None of them raise on
odd input; a non-string argument is treated as an empty line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, ResumeVocabulary

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?<!\d)(\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
GPA_RE = re.compile(r"gpa[:\s]*([0-9]\.[0-9]+)", re.IGNORECASE)
# Looser than the range patterns; used to spot the header line of a job entry.
DATE_TOKEN_RE = re.compile(r"\b(?:\d{1,2}/\d{4}|\d{1,2}/\d{2}|\d{4}|present|current)\b", re.IGNORECASE)
BULLET_RE = re.compile(r"^(?:[•*\-]|\d+\.)")
BULLET_PREFIX_RE = re.compile(r"^(?:[•*\-]|\d+\.)\s*")

_SEP = r"\s*[–—-]\s*"
_OPEN_END = ("present", "current")

# Month-qualified patterns come first so a year-only pattern cannot
# claim part of a MM/YYYY token.
DATE_RANGE_PATTERNS = (
    re.compile(r"(?<!\d)(\d{1,2}/\d{4})" + _SEP + r"(\d{1,2}/\d{4})(?!\d)"),
    re.compile(r"(?<!\d)(\d{4})" + _SEP + r"(\d{4})(?!\d)"),
    re.compile(r"(?<!\d)(\d{1,2}/(?:\d{4}|\d{2}))" + _SEP + r"(present|current)\b", re.IGNORECASE),
    re.compile(r"(?<!\d)(\d{4})" + _SEP + r"(present|current)\b", re.IGNORECASE),
)


@dataclass(frozen=True)
class DateRange:
    """A start/end pair; ``end`` is empty for ongoing ranges."""

    start: str
    end: str = ""
    span: Tuple[int, int] = field(default=(0, 0), compare=False, repr=False)


def _text(line: object) -> str:
    return line if isinstance(line, str) else ""


def find_email(line: object) -> str:
    m = EMAIL_RE.search(_text(line))
    return m.group(0) if m else ""


def find_phone(line: object) -> str:
    m = PHONE_RE.search(_text(line))
    return m.group(0) if m else ""


def find_linkedin(line: object) -> str:
    m = LINKEDIN_RE.search(_text(line))
    return m.group(0) if m else ""


def find_year(line: object) -> str:
    m = YEAR_RE.search(_text(line))
    return m.group(0) if m else ""


def find_gpa(line: object) -> str:
    m = GPA_RE.search(_text(line))
    return m.group(1) if m else ""


def find_date_token(line: object) -> str:
    m = DATE_TOKEN_RE.search(_text(line))
    return m.group(0) if m else ""


def find_date_range(line: object) -> Optional[DateRange]:
    """Return the first date range in ``line`` or ``None``.

    Patterns are tried in order: ``MM/YYYY – MM/YYYY``, ``YYYY – YYYY``,
    ``MM/YY – present`` and ``YYYY – present``.  The first pattern that
    matches anywhere in the line wins, even if a later pattern would
    match earlier in the line.
    """
    text = _text(line)
    for pattern in DATE_RANGE_PATTERNS:
        m = pattern.search(text)
        if m:
            end = m.group(2)
            if end.lower() in _OPEN_END:
                end = ""
            return DateRange(start=m.group(1), end=end, span=m.span())
    return None


def find_degree(line: object, vocabulary: ResumeVocabulary = DEFAULT_CONFIG.resume) -> str:
    lowered = _text(line).lower()
    for token in vocabulary.degree_keywords:
        if token in lowered:
            return token
    return ""


def contains_any(line: object, keywords) -> bool:
    lowered = _text(line).lower()
    return any(keyword in lowered for keyword in keywords)


def is_bullet(line: object) -> bool:
    """True for lines opened by ``•``, ``-``, ``*`` or a ``1.`` style prefix."""
    return bool(BULLET_RE.match(_text(line)))


def strip_bullet(line: object) -> str:
    return BULLET_PREFIX_RE.sub("", _text(line)).strip()


def is_technical_skill(text: object, vocabulary: ResumeVocabulary = DEFAULT_CONFIG.resume) -> bool:
    return contains_any(text, vocabulary.technical_keywords)


def categorize_skill(skill: object, vocabulary: ResumeVocabulary = DEFAULT_CONFIG.resume) -> str:
    """Name the ``Skills`` bucket a fragment belongs to.

    Technical keywords are checked first, then tools, then spoken
    languages.  Anything the vocabularies do not cover is ``"soft"``.
    """
    if contains_any(skill, vocabulary.technical_keywords):
        return "technical"
    if contains_any(skill, vocabulary.tool_keywords):
        return "tools"
    if contains_any(skill, vocabulary.language_keywords):
        return "languages"
    return "soft"
