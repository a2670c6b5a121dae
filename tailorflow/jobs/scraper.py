"""
Job posting scraper.

``JobPostingExtractor.scrape`` fetches a job page with a single
``requests`` GET and hands the HTML to :func:`extract_fields`.  The
strategy (LinkedIn, Indeed or generic career page) is chosen from the
URL host and decides both the request headers and the selector chains.

There is no retry or backoff: a timeout, DNS failure or non-2xx status
is raised once as :class:`JobScrapeError` and the caller decides what
to tell the user (typically "paste the description manually").
"""

from __future__ import annotations

import json
import logging
import re
from typing import Dict, Optional
from urllib.parse import urlparse

import requests

from ..config import DEFAULT_CONFIG, ExtractorConfig, ScraperSettings
from .html_to_fields import extract_fields, site_for, site_strategies
from .schema import StructuredJobPosting

logger = logging.getLogger(__name__)

JOB_URL_PATTERNS = (
    re.compile(r"linkedin\.com/jobs/"),
    re.compile(r"indeed\.com/jobs/"),
    re.compile(r"jobs\."),
    re.compile(r"careers\."),
    re.compile(r"job", re.IGNORECASE),
    re.compile(r"career", re.IGNORECASE),
    re.compile(r"position", re.IGNORECASE),
)

BASE_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
}


class JobScrapeError(Exception):
    """A job page could not be fetched."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to scrape job from URL {url}: {cause}")


def request_headers(site: str, settings: ScraperSettings = DEFAULT_CONFIG.scraper) -> Dict[str, str]:
    """Browser-like headers with the strategy's fixed User-Agent."""
    headers = dict(BASE_HEADERS)
    headers["User-Agent"] = settings.user_agents.get(site) or settings.user_agents["generic"]
    if site == "linkedin":
        headers["Accept"] = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
        headers["Upgrade-Insecure-Requests"] = "1"
    return headers


def is_valid_job_url(url: object) -> bool:
    """Cheap pre-filter for URLs that look like job postings.

    True when the URL has a scheme and host and matches one of the
    known job-board or career-page patterns.  Passing does not mean the
    page can actually be scraped.
    """
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if not parsed.scheme or not parsed.netloc:
        return False
    return any(p.search(url) for p in JOB_URL_PATTERNS)


class JobPostingExtractor:
    """Fetch and structure job postings.

    Args:
        config: Vocabulary and HTTP settings.
        session: Optional ``requests.Session`` to issue the GET with.
            It is borrowed, never closed here.
    """

    def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG,
                 session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session
        self._strategies = site_strategies(config.job)

    def scrape(self, url: str) -> StructuredJobPosting:
        """Download ``url`` and extract its job posting.

        Raises:
            JobScrapeError: On any transport failure, timeout or
                non-2xx response.
        """
        site = site_for(url)
        headers = request_headers(site, self.config.scraper)
        logger.info("Scraping %s job posting from %s", site, url)
        get = self.session.get if self.session is not None else requests.get
        try:
            resp = get(url, headers=headers, timeout=self.config.scraper.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Scraping %s failed: %s", url, exc)
            raise JobScrapeError(url, exc) from exc
        return self.extract(resp.text, url)

    def extract(self, html: object, url: Optional[str] = None) -> StructuredJobPosting:
        """Structure already-fetched HTML; never raises on bad markup."""
        return extract_fields(html, url=url, config=self.config, strategies=self._strategies)


def save_job_json(posting: StructuredJobPosting, out_path: str) -> None:
    """Serialize a :class:`StructuredJobPosting` to JSON."""
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(posting.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Wrote job JSON to %s", out_path)
