"""
Résumé parser.

This module turns the raw text of a résumé (typically the output of a
PDF-to-text conversion) into a :class:`StructuredResume`.  There is no
schema in the input, so structure is recovered with layered
heuristics:

* contact details are read from the first few lines;
* a single pass over the remaining lines drives a section state
  machine (summary, experience, education, skills, certifications,
  projects) whose boundaries come from :mod:`.sections`;
* inside each section, :mod:`.fields` recognises dates, degrees, GPAs
  and skill categories line by line.

Extraction is best effort.  Malformed or empty input never raises; it
produces the all-empty skeleton instead.  The only hard failure is
upstream: an unreadable PDF is reported by :mod:`.documents` before
this parser is reached.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from ..config import DEFAULT_CONFIG, ExtractorConfig
from .documents import extract_text_from_file
from .fields import (
    categorize_skill,
    contains_any,
    find_date_range,
    find_date_token,
    find_degree,
    find_email,
    find_gpa,
    find_linkedin,
    find_phone,
    find_year,
    is_bullet,
    is_technical_skill,
    strip_bullet,
)
from .lines import iter_lines
from .schema import (
    Certification,
    ContactInfo,
    Education,
    Project,
    StructuredResume,
    WorkExperience,
)
from .sections import Section, SectionClassifier

logger = logging.getLogger(__name__)

LOCATION_RE = re.compile(r"([A-Za-z\s]+,\s*[A-Za-z\s]+)")
SKILL_SPLIT_RE = re.compile(r"[,;•\-\n]")
AT_SPLIT_RE = re.compile(r"\s+at\s+", re.IGNORECASE)
DASH_SPLIT_RE = re.compile(r"\s+[–-]\s+")
EMPTY_PARENS_RE = re.compile(r"\(\s*\)")
EDGE_PUNCT = " \t|,;:–—-()"

ActiveRecord = Union[WorkExperience, Education, Project]


@dataclass
class ParseState:
    """Mutable cursor for one extraction pass."""

    section: Section = Section.NONE
    active: Optional[ActiveRecord] = None


class ResumeStructureExtractor:
    """Heuristic section state machine over résumé lines.

    Instances hold only the (immutable) vocabulary and are safe to reuse
    across calls; all per-call state lives in a :class:`ParseState`.
    """

    def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG) -> None:
        self.vocabulary = config.resume
        self.classifier = SectionClassifier(self.vocabulary)
        self._handlers: Dict[Section, Callable[[ParseState, StructuredResume, str], None]] = {
            Section.SUMMARY: self._summary_line,
            Section.EXPERIENCE: self._experience_line,
            Section.EDUCATION: self._education_line,
            Section.SKILLS: self._skills_line,
            Section.CERTIFICATIONS: self._certification_line,
            Section.PROJECTS: self._project_line,
        }

    def extract(self, text: object) -> StructuredResume:
        """Parse résumé text into a :class:`StructuredResume`.

        Args:
            text: Raw résumé text.  ``None``, empty and non-string
                values are accepted and yield the empty skeleton.

        Returns:
            A fully keyed record; fields that could not be recovered
            stay empty.
        """
        resume = StructuredResume()
        state = ParseState()
        for index, line in enumerate(iter_lines(text)):
            if index < self.vocabulary.contact_line_count:
                self._contact_line(resume.contact_info, line)
            self._step(state, resume, line)
        self._flush(state, resume)
        logger.debug(
            "Parsed résumé: %d roles, %d schools, %d certifications, %d projects",
            len(resume.work_experience),
            len(resume.education),
            len(resume.certifications),
            len(resume.projects),
        )
        return resume

    # state machine

    def _step(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        target = self.classifier.section_for(line)
        if state.section is Section.NONE:
            if target is not Section.NONE:
                self._enter(state, resume, target, line)
            return
        if (
            target is not Section.NONE
            and target is not state.section
            and self.classifier.is_heading_candidate(line)
        ):
            self._enter(state, resume, target, line)
            return
        if self.classifier.is_section_header(line) and not self.classifier.opens(state.section, line):
            # Unknown or foreign header: leave the section and wait for a
            # later line to name the next one.
            self._flush(state, resume)
            logger.debug("Left %s at header %r", state.section.value, line)
            state.section = Section.NONE
            return
        self._handlers[state.section](state, resume, line)

    def _enter(self, state: ParseState, resume: StructuredResume, section: Section, line: str) -> None:
        self._flush(state, resume)
        logger.debug("Entered %s at %r", section.value, line)
        state.section = section

    def _flush(self, state: ParseState, resume: StructuredResume) -> None:
        record = state.active
        state.active = None
        if isinstance(record, WorkExperience):
            resume.work_experience.append(record)
        elif isinstance(record, Education):
            resume.education.append(record)
        elif isinstance(record, Project):
            resume.projects.append(record)

    # contact block

    def _contact_line(self, contact: ContactInfo, line: str) -> None:
        email = find_email(line)
        phone = find_phone(line)
        linkedin = find_linkedin(line)
        if email and not contact.email:
            contact.email = email
        if phone and not contact.phone:
            contact.phone = phone
        if linkedin and not contact.linkedin:
            contact.linkedin = linkedin
        if email or phone or linkedin:
            return
        if not contact.name and len(line) < 50 and not self.classifier.is_section_header(line):
            contact.name = line
        if not contact.location and "," in line:
            m = LOCATION_RE.search(line)
            if m:
                contact.location = m.group(1).strip()

    # section handlers

    def _summary_line(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        if len(line) <= 10:
            return
        if resume.professional_summary:
            resume.professional_summary += " " + line
        else:
            resume.professional_summary = line

    def _experience_line(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        entry = state.active if isinstance(state.active, WorkExperience) else None
        if entry is not None and is_bullet(line):
            bullet = strip_bullet(line)
            if bullet:
                entry.bullets.append(bullet)
            return
        dates = find_date_range(line)
        if dates is not None or "–" in line or "-" in line:
            self._flush(state, resume)
            state.active = self._start_experience(line)
            return
        if entry is not None and len(line) > 20 and not self.classifier.is_section_header(line):
            entry.bullets.append(line)

    def _start_experience(self, line: str) -> WorkExperience:
        entry = WorkExperience()
        dates = find_date_range(line)
        if dates is not None:
            entry.start_date = dates.start
            entry.end_date = dates.end
            remainder = line[: dates.span[0]] + " " + line[dates.span[1]:]
        else:
            token = find_date_token(line)
            remainder = line.replace(token, " ", 1) if token else line
        remainder = EMPTY_PARENS_RE.sub(" ", remainder).strip(EDGE_PUNCT)
        if not remainder:
            return entry
        parts = AT_SPLIT_RE.split(remainder, maxsplit=1)
        if len(parts) == 2:
            entry.position = parts[0].strip(EDGE_PUNCT)
            entry.company = parts[1].strip(EDGE_PUNCT)
            return entry
        parts = DASH_SPLIT_RE.split(remainder, maxsplit=1)
        if len(parts) == 2:
            entry.company = parts[0].strip(EDGE_PUNCT)
            entry.position = parts[1].strip(EDGE_PUNCT)
            return entry
        entry.company = remainder
        return entry

    def _education_line(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        degree = find_degree(line, self.vocabulary)
        if degree or contains_any(line, self.vocabulary.institution_keywords):
            self._flush(state, resume)
            entry = Education(year=find_year(line), gpa=find_gpa(line))
            if contains_any(line, self.vocabulary.school_keywords):
                entry.school = line
            if degree:
                entry.degree = line
            state.active = entry
        elif isinstance(state.active, Education) and contains_any(line, ("major", "field")):
            state.active.field = line

    def _skills_line(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        for fragment in SKILL_SPLIT_RE.split(line):
            fragment = fragment.strip()
            if fragment:
                resume.skills.add(categorize_skill(fragment, self.vocabulary), fragment)

    def _certification_line(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        # Issuers are not recoverable from a single line; left empty.
        if len(line) > 10:
            resume.certifications.append(Certification(name=line, year=find_year(line)))

    def _project_line(self, state: ParseState, resume: StructuredResume, line: str) -> None:
        if not is_bullet(line):
            if len(line) > 5:
                self._flush(state, resume)
                state.active = Project(name=line)
            return
        project = state.active if isinstance(state.active, Project) else None
        bullet = strip_bullet(line)
        if project is None or not bullet:
            return
        if is_technical_skill(bullet, self.vocabulary):
            project.technologies.append(bullet)
        elif project.description:
            project.description += " " + bullet
        else:
            project.description = bullet


def extract_resume_structure(text: object, config: ExtractorConfig = DEFAULT_CONFIG) -> StructuredResume:
    """Parse résumé text with a fresh :class:`ResumeStructureExtractor`."""
    return ResumeStructureExtractor(config).extract(text)


def parse_resume(file_path: str, config: ExtractorConfig = DEFAULT_CONFIG) -> StructuredResume:
    """Read a résumé file and parse it into a :class:`StructuredResume`.

    Args:
        file_path: Path to the résumé.  Supported extensions are
            ``.pdf``, ``.docx`` and plain text.
        config: Vocabulary configuration.

    Returns:
        The extracted structure.

    Raises:
        PDFParseError: If a PDF yields no readable text.
        DocumentError: If the file type is unsupported.
    """
    text = extract_text_from_file(file_path)
    return extract_resume_structure(text, config)


def save_resume_json(resume: StructuredResume, out_path: str) -> None:
    """Serialize a :class:`StructuredResume` to JSON.

    Args:
        resume: The structured résumé to save.
        out_path: Path where the JSON file will be written.
    """
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(resume.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Wrote résumé JSON to %s", out_path)
