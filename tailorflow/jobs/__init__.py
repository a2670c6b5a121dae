"""
Job posting extraction.

This package converts job-page HTML into a
:class:`StructuredJobPosting`.  Site-specific selector chains resolve
the header fields; keyword classifiers itemise the description into
requirements, responsibilities, skills and qualifications.  The
scraper performs the single HTTP fetch and reports transport failures
as :class:`JobScrapeError`.
"""

from .schema import StructuredJobPosting  # noqa: F401
from .html_to_fields import (  # noqa: F401
    extract_fields,
    extract_qualifications,
    extract_requirements,
    extract_responsibilities,
    extract_skills,
)
from .scraper import JobPostingExtractor, JobScrapeError, is_valid_job_url, save_job_json  # noqa: F401
