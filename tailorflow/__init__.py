"""
Tailorflow extraction engine.

This package holds the heuristic document-extraction core of the
resume-tailoring service.  It turns unstructured input into structured
records that the LLM rewriting layer and the history views consume.

The two extractors are independent:

1. **resume** – Normalise the raw text of an uploaded résumé into
   lines, walk them with a section state machine and assemble a
   :class:`~tailorflow.resume.schema.StructuredResume` (contact info,
   summary, work history, education, skills, certifications,
   projects).
2. **jobs** – Fetch a job page (LinkedIn, Indeed or a generic career
   site), resolve header fields through selector chains and classify
   the description into requirements, responsibilities, skills and
   qualifications.
3. **config** – Immutable keyword tables and HTTP settings, optionally
   overridden from YAML.
4. **cli** – Command line entry point wiring the above together.

Both extractors are best effort: bad input degrades to empty fields.
Only network failures while scraping cross the package boundary as
errors.
"""

from .config import DEFAULT_CONFIG, ExtractorConfig, load_config  # noqa: F401
from .jobs import JobPostingExtractor, JobScrapeError, StructuredJobPosting, is_valid_job_url  # noqa: F401
from .resume import PDFParseError, StructuredResume, extract_resume_structure  # noqa: F401

__version__ = "0.1.0"
