"""
Unittest suite for the job posting scraper.

``requests.get`` is patched throughout so no network requests are made.
The tests verify the request the scraper issues (headers, timeout), the
single-attempt failure behaviour and the URL pre-filter.
"""

from __future__ import annotations

import unittest
from unittest import mock

import requests

from tailorflow.config import DEFAULT_CONFIG
from tailorflow.jobs.scraper import (
    JobPostingExtractor,
    JobScrapeError,
    is_valid_job_url,
    request_headers,
)

PAGE = """
<html><body>
<h1 class="jobsearch-JobInfoHeader-title">Site Reliability Engineer</h1>
<div class="jobsearch-InlineCompanyRating">Hooli</div>
<div id="jobDescriptionText">
<ul>
<li>You will be responsible for on-call rotations across regions</li>
<li>Must have Linux and Kubernetes experience at scale</li>
</ul>
</div>
</body></html>
"""


def _response(text: str = PAGE) -> mock.Mock:
    resp = mock.Mock()
    resp.text = text
    resp.raise_for_status = mock.Mock()
    return resp


class TestScrape(unittest.TestCase):
    """Single fetch and error reporting."""

    @mock.patch("tailorflow.jobs.scraper.requests.get")
    def test_scrape_indeed_posting(self, get: mock.Mock) -> None:
        get.return_value = _response()
        url = "https://www.indeed.com/viewjob?jk=abc123"
        posting = JobPostingExtractor().scrape(url)

        get.assert_called_once()
        args, kwargs = get.call_args
        self.assertEqual(args, (url,))
        self.assertEqual(kwargs["timeout"], 10.0)
        self.assertEqual(kwargs["headers"]["User-Agent"], DEFAULT_CONFIG.scraper.user_agents["indeed"])

        self.assertEqual(posting.source, "indeed")
        self.assertEqual(posting.url, url)
        self.assertEqual(posting.title, "Site Reliability Engineer")
        self.assertEqual(posting.company, "Hooli")
        self.assertEqual(posting.requirements, ["Must have Linux and Kubernetes experience at scale"])
        self.assertEqual(
            posting.responsibilities,
            ["You will be responsible for on-call rotations across regions"],
        )
        self.assertEqual(posting.skills, ["linux", "kubernetes"])

    @mock.patch("tailorflow.jobs.scraper.requests.get")
    def test_timeout_raises_once(self, get: mock.Mock) -> None:
        get.side_effect = requests.Timeout("read timed out")
        url = "https://www.linkedin.com/jobs/view/42"
        with self.assertRaises(JobScrapeError) as ctx:
            JobPostingExtractor().scrape(url)
        self.assertEqual(ctx.exception.url, url)
        self.assertIsInstance(ctx.exception.cause, requests.Timeout)
        self.assertIn(url, str(ctx.exception))
        get.assert_called_once()

    @mock.patch("tailorflow.jobs.scraper.requests.get")
    def test_http_error_status(self, get: mock.Mock) -> None:
        resp = _response()
        resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        get.return_value = resp
        with self.assertRaises(JobScrapeError):
            JobPostingExtractor().scrape("https://careers.example.com/jobs/1")

    def test_session_is_used_when_given(self) -> None:
        session = mock.Mock()
        session.get.return_value = _response()
        JobPostingExtractor(session=session).scrape("https://www.indeed.com/viewjob?jk=1")
        session.get.assert_called_once()

    def test_extract_without_fetch(self) -> None:
        posting = JobPostingExtractor().extract(PAGE, "https://www.indeed.com/viewjob?jk=1")
        self.assertEqual(posting.title, "Site Reliability Engineer")


class TestHeaders(unittest.TestCase):
    def test_linkedin_headers(self) -> None:
        headers = request_headers("linkedin")
        self.assertEqual(headers["User-Agent"], DEFAULT_CONFIG.scraper.user_agents["linkedin"])
        self.assertIn("image/webp", headers["Accept"])
        self.assertEqual(headers["Upgrade-Insecure-Requests"], "1")

    def test_generic_headers(self) -> None:
        headers = request_headers("generic")
        self.assertEqual(headers["User-Agent"], DEFAULT_CONFIG.scraper.user_agents["generic"])
        self.assertNotIn("Upgrade-Insecure-Requests", headers)


class TestValidJobUrl(unittest.TestCase):
    def test_job_urls(self) -> None:
        self.assertTrue(is_valid_job_url("https://careers.example.com/123"))
        self.assertTrue(is_valid_job_url("https://www.linkedin.com/jobs/view/123"))
        self.assertTrue(is_valid_job_url("https://example.com/open-positions"))

    def test_non_job_urls(self) -> None:
        self.assertFalse(is_valid_job_url("https://example.com/about"))
        self.assertFalse(is_valid_job_url("not a url"))
        self.assertFalse(is_valid_job_url("careers.example.com/jobs"))
        self.assertFalse(is_valid_job_url(None))


if __name__ == "__main__":
    unittest.main()
