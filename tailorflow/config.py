"""
Extractor configuration.

The heuristics in this package are driven by hand-maintained keyword
tables: section entry words, skill vocabularies, the job-posting item
keywords and the scraper's request settings.  They live here as frozen
dataclasses built once at import time (``DEFAULT_CONFIG``) and passed
by reference into each extractor instance, so no extractor holds
mutable module state.

A YAML file may override individual fields.  Top-level keys are
``resume``, ``job`` and ``scraper``; each maps field names to new
values, e.g.::

    scraper:
      timeout: 20
    resume:
      tool_keywords: [excel, jira, notion]

The ``TAILORFLOW_TIMEOUT`` environment variable overrides the request
timeout after the file has been applied.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import yaml  # type: ignore

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be applied."""


@dataclass(frozen=True)
class ResumeVocabulary:
    """Keyword tables used by the résumé extractor."""

    header_keywords: Tuple[str, ...] = (
        "experience", "education", "skills", "projects", "certifications",
        "summary", "objective", "profile", "contact", "references",
    )
    header_max_length: int = 50
    summary_keywords: Tuple[str, ...] = ("summary", "objective", "profile", "about", "overview")
    experience_keywords: Tuple[str, ...] = ("experience", "work", "employment", "career", "professional")
    education_keywords: Tuple[str, ...] = ("education", "academic", "university", "college", "degree")
    skills_keywords: Tuple[str, ...] = ("skills", "technical", "technologies", "competencies", "abilities")
    certification_keywords: Tuple[str, ...] = ("certification", "certificate", "licensed", "credential")
    project_keywords: Tuple[str, ...] = ("project", "portfolio", "work")
    degree_keywords: Tuple[str, ...] = (
        "bachelor", "master", "phd", "associate", "doctorate", "b.s.", "m.s.", "b.a.", "m.a.",
    )
    institution_keywords: Tuple[str, ...] = ("university", "college")
    school_keywords: Tuple[str, ...] = ("university", "college", "institute", "school of", "academy")
    technical_keywords: Tuple[str, ...] = (
        "javascript", "python", "java", "react", "node", "angular", "vue", "docker",
        "aws", "azure", "sql", "nosql", "mongodb", "postgresql", "mysql", "git",
        "html", "css", "typescript", "nodejs", "express", "django", "flask",
        "kubernetes", "terraform", "ci/cd", "devops", "linux", "ubuntu", "api",
        "rest", "graphql", "microservices", "machine learning", "ai", "data science",
    )
    tool_keywords: Tuple[str, ...] = (
        "excel", "powerpoint", "word", "slack", "jira", "trello", "figma", "photoshop",
        "illustrator", "sketch", "tableau", "power bi", "salesforce", "hubspot",
    )
    language_keywords: Tuple[str, ...] = (
        "english", "spanish", "french", "german", "chinese", "japanese", "korean",
        "portuguese", "russian", "arabic", "hindi",
    )
    contact_line_count: int = 5


@dataclass(frozen=True)
class JobVocabulary:
    """Keyword tables and caps used on job descriptions."""

    requirement_keywords: Tuple[str, ...] = ("requirement", "require", "must have", "needed", "qualifications")
    responsibility_keywords: Tuple[str, ...] = ("responsibility", "responsible", "you will", "duties", "role")
    qualification_keywords: Tuple[str, ...] = (
        "qualification", "degree", "bachelor", "master", "phd", "experience",
        "years of experience", "background", "education",
    )
    skill_vocabulary: Tuple[str, ...] = (
        "javascript", "python", "java", "react", "node", "angular", "vue", "docker",
        "aws", "azure", "gcp", "sql", "nosql", "mongodb", "postgresql", "mysql",
        "git", "html", "css", "typescript", "nodejs", "express", "django", "flask",
        "kubernetes", "terraform", "ci/cd", "devops", "linux", "ubuntu", "api",
        "rest", "graphql", "microservices", "machine learning", "ai", "data science",
        "excel", "powerpoint", "word", "salesforce", "tableau", "power bi",
    )
    max_requirements: int = 10
    max_responsibilities: int = 10
    max_skills: int = 20
    max_qualifications: int = 8
    fallback_min_length: int = 10
    fallback_max_length: int = 200
    description_min_length: int = 101


@dataclass(frozen=True)
class ScraperSettings:
    """HTTP settings for the single job-page fetch."""

    timeout: float = 10.0
    user_agents: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({
        "linkedin": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        "indeed": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        "generic": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:89.0) "
            "Gecko/20100101 Firefox/89.0"
        ),
    }))


@dataclass(frozen=True)
class ExtractorConfig:
    """Bundle of every table the extractors read."""

    resume: ResumeVocabulary = field(default_factory=ResumeVocabulary)
    job: JobVocabulary = field(default_factory=JobVocabulary)
    scraper: ScraperSettings = field(default_factory=ScraperSettings)


DEFAULT_CONFIG = ExtractorConfig()


def _override(section: object, values: Dict[str, object], name: str) -> object:
    known = {f.name: f for f in fields(section)}
    changes: Dict[str, object] = {}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown {name} setting: {key}")
        current = getattr(section, key)
        if isinstance(current, tuple):
            if not isinstance(value, (list, tuple)):
                raise ConfigError(f"{name}.{key} must be a list")
            value = tuple(str(v).lower() for v in value)
        elif isinstance(current, Mapping):
            if not isinstance(value, dict):
                raise ConfigError(f"{name}.{key} must be a mapping")
            value = MappingProxyType({**current, **{str(k): str(v) for k, v in value.items()}})
        elif isinstance(current, float):
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name}.{key} must be a number, got {value!r}")
            value = float(value)
        elif isinstance(current, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name}.{key} must be an integer, got {value!r}")
        changes[key] = value
    return replace(section, **changes)


def load_config(path: Optional[str] = None) -> ExtractorConfig:
    """Build an :class:`ExtractorConfig` from defaults and an optional YAML file.

    Args:
        path: Optional path to a YAML file with ``resume``, ``job`` or
            ``scraper`` mappings.

    Returns:
        A frozen configuration object.

    Raises:
        ConfigError: If the file is not a mapping or names an unknown
            section or setting.
    """
    config = DEFAULT_CONFIG
    if path:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        sections = {}
        for name, values in data.items():
            if name not in ("resume", "job", "scraper"):
                raise ConfigError(f"Unknown config section: {name}")
            if not isinstance(values, dict):
                raise ConfigError(f"Config section {name} must be a mapping")
            sections[name] = _override(getattr(config, name), values, name)
        config = replace(config, **sections)
        logger.debug("Loaded config overrides from %s", path)
    timeout = os.getenv("TAILORFLOW_TIMEOUT")
    if timeout:
        try:
            config = replace(config, scraper=replace(config.scraper, timeout=float(timeout)))
        except ValueError as exc:
            raise ConfigError(f"TAILORFLOW_TIMEOUT must be a number, got {timeout!r}") from exc
    return config
