"""
Section detection for résumé text.

Two tests with deliberately different strictness are provided:

* ``is_section_header`` is the strict *exit* test: a short, all-caps
  line naming a section (``EDUCATION``).
* ``section_for`` is the loose *entry* test: any line containing one of
  a section's entry keywords (``Professional Experience``).

Résumés often open a section with a soft phrase and close it with a
later shouting-case header, so the two tests are kept separate.
"""

from __future__ import annotations

import enum
from typing import Dict, Tuple

from ..config import DEFAULT_CONFIG, ResumeVocabulary
from .fields import contains_any, find_date_token, is_bullet


class Section(enum.Enum):
    NONE = "none"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    PROJECTS = "projects"


# Tie-break order for entry keywords ending at the same position ("work"
# opens both experience and projects).
ENTRY_PRIORITY: Tuple[Section, ...] = (
    Section.SUMMARY,
    Section.EDUCATION,
    Section.SKILLS,
    Section.CERTIFICATIONS,
    Section.EXPERIENCE,
    Section.PROJECTS,
)


def _last_keyword_end(lowered: str, keywords: Tuple[str, ...]) -> int:
    ends = [lowered.rfind(k) + len(k) for k in keywords if k in lowered]
    return max(ends, default=-1)


class SectionClassifier:
    """Keyword and casing heuristics for section boundaries."""

    def __init__(self, vocabulary: ResumeVocabulary = DEFAULT_CONFIG.resume) -> None:
        self.vocabulary = vocabulary
        self._entry_keywords: Dict[Section, Tuple[str, ...]] = {
            Section.SUMMARY: vocabulary.summary_keywords,
            Section.EXPERIENCE: vocabulary.experience_keywords,
            Section.EDUCATION: vocabulary.education_keywords,
            Section.SKILLS: vocabulary.skills_keywords,
            Section.CERTIFICATIONS: vocabulary.certification_keywords,
            Section.PROJECTS: vocabulary.project_keywords,
        }

    def is_section_header(self, line: object) -> bool:
        if not line or not isinstance(line, str):
            return False
        return (
            contains_any(line, self.vocabulary.header_keywords)
            and len(line) < self.vocabulary.header_max_length
            and line == line.upper()
        )

    def section_keywords_for(self, section: Section) -> Tuple[str, ...]:
        return self._entry_keywords.get(section, ())

    def opens(self, section: Section, line: object) -> bool:
        """True if ``line`` carries one of ``section``'s entry keywords."""
        return contains_any(line, self.section_keywords_for(section))

    def section_for(self, line: object) -> Section:
        """Section whose entry keyword ends last in ``line``.

        Headings put the section noun after its modifiers (``Technical
        Projects``, ``Academic Projects``, ``Professional Summary``), so
        the rightmost keyword names the section.  Ties go to the earlier
        section in ``ENTRY_PRIORITY``.
        """
        lowered = line.lower() if isinstance(line, str) else ""
        best, best_end = Section.NONE, -1
        for section in ENTRY_PRIORITY:
            end = _last_keyword_end(lowered, self.section_keywords_for(section))
            if end > best_end:
                best, best_end = section, end
        return best

    def is_heading_candidate(self, line: object) -> bool:
        """Could ``line`` be a section heading rather than body text?

        Used while a section is already open: list items, long lines and
        lines carrying dates are treated as content even when they
        mention a section keyword.
        """
        if not line or not isinstance(line, str):
            return False
        return (
            not is_bullet(line)
            and len(line) < self.vocabulary.header_max_length
            and not find_date_token(line)
        )
