"""
HTML to fields extractor.

This module turns the HTML of a job posting into a
:class:`StructuredJobPosting`.  Header fields (title, company,
location, metadata) come from site-specific selector chains, with a
generic chain for company career pages.  The description is then
itemised (its ``<li>`` and ``<p>`` elements, or its lines and sentences
when it has no markup) and four independent keyword classifiers pick
out requirements, responsibilities, skills and qualifications.  The
buckets may overlap; the same sentence can land in several.

Nothing here raises on empty or malformed HTML; unresolved fields are
left empty.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ..config import DEFAULT_CONFIG, ExtractorConfig, JobVocabulary
from .schema import StructuredJobPosting
from .selectors import SelectorChain, clean_text, first_text_of, html_of, html_to_text, resolve

logger = logging.getLogger(__name__)

SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
ITEM_MARKER_RE = re.compile(r"^(?:[•*\-–]|\d+[.)])\s*")


@dataclass(frozen=True)
class SiteStrategy:
    """Selector chains for one family of job pages."""

    name: str
    title: SelectorChain
    company: SelectorChain
    location: SelectorChain
    description: SelectorChain
    salary: Optional[SelectorChain] = None
    employment_type: Optional[SelectorChain] = None
    posted_date: Optional[SelectorChain] = None
    url_fallbacks: bool = False


def site_strategies(vocabulary: JobVocabulary = DEFAULT_CONFIG.job) -> Dict[str, SiteStrategy]:
    """Build the LinkedIn, Indeed and generic strategies."""
    description_length = vocabulary.description_min_length
    linkedin = SiteStrategy(
        name="linkedin",
        title=SelectorChain.of([".top-card-layout__title"]) + SelectorChain.of(["h1"], first_text_of),
        company=SelectorChain.of([".topcard__org-name-link", '[data-test-id="company-name"]']),
        location=SelectorChain.of([".topcard__flavor-row", '[data-test-id="job-location"]']),
        description=SelectorChain.of(
            [".description__text", ".show-more-less-html__markup", '[data-test-id="job-description"]'],
            html_of, min_length=description_length, html=True,
        ),
        salary=SelectorChain.of([".salary-compensation-container__text"]),
        employment_type=SelectorChain.of([".job-criteria__text"], first_text_of),
        posted_date=SelectorChain.of([".posted-time-ago__text"]),
    )
    indeed = SiteStrategy(
        name="indeed",
        title=SelectorChain.of([".jobsearch-JobInfoHeader-title"]) + SelectorChain.of(["h1"], first_text_of),
        company=SelectorChain.of([".jobsearch-InlineCompanyRating", '[data-testid="inlineHeader-companyName"]']),
        location=SelectorChain.of([".jobsearch-JobInfoHeader-companyLocation", '[data-testid="job-location"]']),
        description=SelectorChain.of(
            ["#jobDescriptionText", ".jobsearch-jobDescriptionText",
             '[data-testid="jobsearch-JobComponent-description"]'],
            html_of, min_length=description_length, html=True,
        ),
        salary=SelectorChain.of([".salary-snippet-container"]),
        employment_type=SelectorChain.of([".jobsearch-JobMetadataHeader-item"], first_text_of),
        posted_date=SelectorChain.of([".jobsearch-JobMetadataFooter-item"], first_text_of),
    )
    generic = SiteStrategy(
        name="generic",
        title=SelectorChain.of(
            ["h1", ".job-title", ".position-title", '[class*="title"]',
             ".job-header h1", ".position h1", ".posting-headline h1"],
            first_text_of,
        ),
        company=SelectorChain.of(
            [".company-name", ".employer", ".organization", '[class*="company"]',
             ".job-company", ".posting-company", ".company"],
            first_text_of,
        ),
        location=SelectorChain.of(
            [".location", ".job-location", ".position-location", '[class*="location"]',
             ".job-location-text", ".posting-location"],
            first_text_of,
        ),
        description=SelectorChain.of(
            [".job-description", ".description", ".posting-description", '[class*="description"]',
             ".job-details", ".position-details", ".requirements-section",
             ".job-content", ".posting-body", ".job-main-content"],
            html_of, min_length=description_length, html=True,
        ),
        url_fallbacks=True,
    )
    return {s.name: s for s in (linkedin, indeed, generic)}


def site_for(url: Optional[str]) -> str:
    """Pick a strategy name from the URL host."""
    if not url:
        return "generic"
    host = urlparse(url).netloc.lower() or url.lower()
    if "linkedin.com" in host:
        return "linkedin"
    if "indeed.com" in host:
        return "indeed"
    return "generic"


def title_from_url(url: Optional[str]) -> str:
    """Guess a title from the last path segment (``senior-dev`` -> ``Senior Dev``)."""
    if not url:
        return ""
    segment = urlparse(url).path.rstrip("/").split("/")[-1]
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), segment.replace("-", " ")).strip()


def company_from_url(url: Optional[str]) -> str:
    if not url:
        return ""
    host = urlparse(url).hostname or ""
    return host.replace("www.", "").split(".")[0]


# description classifiers

def description_items(description: object) -> Tuple[List[str], List[str]]:
    """Split a description into candidate items.

    Returns:
        ``(items, list_items)``.  For HTML with ``<li>``/``<p>`` markup,
        ``items`` are those elements in document order and
        ``list_items`` the ``<li>`` elements alone.  Otherwise both are
        the description's lines, further split into sentences.
    """
    if not description or not isinstance(description, str):
        return [], []
    soup = BeautifulSoup(description, "html.parser")
    elements = soup.find_all(["li", "p"])
    if elements:
        items = [clean_text(el.get_text(" ")) for el in elements]
        list_items = [clean_text(li.get_text(" ")) for li in soup.find_all("li")]
        return [i for i in items if i], [i for i in list_items if i]
    pieces: List[str] = []
    for line in soup.get_text("\n").splitlines():
        line = ITEM_MARKER_RE.sub("", clean_text(line))
        pieces.extend(s for s in SENTENCE_SPLIT_RE.split(line) if s)
    return pieces, list(pieces)


def _matching(items: Iterable[str], keywords: Iterable[str]) -> List[str]:
    keywords = tuple(keywords)
    return [item for item in items if any(k in item.lower() for k in keywords)]


def _length_bounded(items: Iterable[str], vocabulary: JobVocabulary) -> List[str]:
    return [
        item for item in items
        if vocabulary.fallback_min_length <= len(item) < vocabulary.fallback_max_length
    ]


def extract_requirements(description: object, vocabulary: JobVocabulary = DEFAULT_CONFIG.job) -> List[str]:
    items, list_items = description_items(description)
    found = _matching(items, vocabulary.requirement_keywords)
    if not found:
        found = _length_bounded(list_items, vocabulary)
    return found[: vocabulary.max_requirements]


def extract_responsibilities(description: object, vocabulary: JobVocabulary = DEFAULT_CONFIG.job) -> List[str]:
    items, list_items = description_items(description)
    found = _matching(items, vocabulary.responsibility_keywords)
    if not found:
        found = _length_bounded(list_items, vocabulary)
    return found[: vocabulary.max_responsibilities]


def extract_qualifications(description: object, vocabulary: JobVocabulary = DEFAULT_CONFIG.job) -> List[str]:
    items, _ = description_items(description)
    return _matching(items, vocabulary.qualification_keywords)[: vocabulary.max_qualifications]


def extract_skills(description: object, vocabulary: JobVocabulary = DEFAULT_CONFIG.job) -> List[str]:
    """Vocabulary terms found anywhere in the description.

    Terms are plain substrings (``java`` also matches inside
    ``javascript``) and are returned in order of first occurrence in
    the text.
    """
    text = html_to_text(description).lower()
    if not text:
        return []
    hits: Dict[str, Tuple[int, int]] = {}
    for order, skill in enumerate(vocabulary.skill_vocabulary):
        pos = text.find(skill)
        if pos >= 0 and skill not in hits:
            hits[skill] = (pos, order)
    ranked = sorted(hits, key=lambda s: hits[s])
    return ranked[: vocabulary.max_skills]


def extract_fields(html: object, *, url: Optional[str] = None,
                   config: ExtractorConfig = DEFAULT_CONFIG,
                   strategies: Optional[Dict[str, SiteStrategy]] = None) -> StructuredJobPosting:
    """Extract a :class:`StructuredJobPosting` from job-page HTML.

    Args:
        html: Raw HTML of the job posting.  Empty or non-string values
            produce an empty record.
        url: Canonical URL of the posting; selects the site strategy
            and feeds the generic title/company fallbacks.
        config: Vocabulary configuration.
        strategies: Prebuilt strategies, to avoid rebuilding per call.

    Returns:
        A fully keyed record; unresolved fields are empty.
    """
    strategies = strategies or site_strategies(config.job)
    strategy = strategies[site_for(url)]
    posting = StructuredJobPosting(url=url or "", source=strategy.name)
    if not html or not isinstance(html, str):
        return posting
    soup = BeautifulSoup(html, "html.parser")

    posting.title = resolve(soup, strategy.title)
    posting.company = resolve(soup, strategy.company)
    posting.location = resolve(soup, strategy.location)
    description_html = resolve(soup, strategy.description)
    posting.description = html_to_text(description_html)
    if strategy.salary is not None:
        posting.salary = resolve(soup, strategy.salary)
    if strategy.employment_type is not None:
        posting.employment_type = resolve(soup, strategy.employment_type)
    if strategy.posted_date is not None:
        posting.posted_date = resolve(soup, strategy.posted_date)
    if strategy.url_fallbacks:
        posting.title = posting.title or title_from_url(url)
        posting.company = posting.company or company_from_url(url)

    if description_html:
        posting.requirements = extract_requirements(description_html, config.job)
        posting.responsibilities = extract_responsibilities(description_html, config.job)
        posting.skills = extract_skills(description_html, config.job)
        posting.qualifications = extract_qualifications(description_html, config.job)
    logger.debug(
        "Extracted %s posting %r: %d requirements, %d responsibilities, %d skills",
        strategy.name, posting.title, len(posting.requirements),
        len(posting.responsibilities), len(posting.skills),
    )
    return posting
