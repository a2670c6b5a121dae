"""
Command line interface for tailorflow.

This module exposes subcommands for each extractor: parsing a résumé
file into JSON, scraping a job posting URL, structuring a saved job
page and checking whether a URL looks like a job posting.  The CLI is
intentionally thin and delegates all work to the ``resume`` and
``jobs`` packages.

Library errors (unreadable PDFs, failed fetches, bad configuration)
are logged and turned into a non-zero exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .config import ConfigError, load_config
from .jobs.scraper import JobPostingExtractor, JobScrapeError, is_valid_job_url, save_job_json
from .resume.documents import DocumentError
from .resume.parse_resume import parse_resume, save_resume_json

logger = logging.getLogger("tailorflow.cli")


def cmd_resume_parse(args: argparse.Namespace) -> int:
    """Parse a résumé file and write its structure as JSON."""
    config = load_config(args.config)
    resume = parse_resume(args.file, config)
    save_resume_json(resume, args.out)
    logger.info(
        "Parsed %s: %d roles, %d schools",
        args.file, len(resume.work_experience), len(resume.education),
    )
    return 0


def cmd_job_scrape(args: argparse.Namespace) -> int:
    """Fetch a job posting URL and write its structure as JSON."""
    if not is_valid_job_url(args.url):
        logger.warning("%s does not look like a job posting URL; trying anyway", args.url)
    extractor = JobPostingExtractor(load_config(args.config))
    posting = extractor.scrape(args.url)
    save_job_json(posting, args.out)
    return 0


def cmd_job_extract(args: argparse.Namespace) -> int:
    """Structure a saved job page."""
    with open(args.html, "r", encoding="utf-8", errors="ignore") as f:
        html = f.read()
    extractor = JobPostingExtractor(load_config(args.config))
    posting = extractor.extract(html, args.url)
    save_job_json(posting, args.out)
    return 0


def cmd_job_validate(args: argparse.Namespace) -> int:
    valid = is_valid_job_url(args.url)
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tailorflow", description="Résumé and job posting extraction")
    parser.add_argument("--config", help="YAML file overriding keyword tables and HTTP settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Resume
    resume_parser = subparsers.add_parser("resume", help="Résumé related commands")
    resume_sub = resume_parser.add_subparsers(dest="subcommand", required=True)
    parse_cmd = resume_sub.add_parser("parse", help="Parse a résumé file")
    parse_cmd.add_argument("--file", required=True, help="Path to résumé file (pdf, docx, txt)")
    parse_cmd.add_argument("--out", required=True, help="Path to output JSON file")
    parse_cmd.set_defaults(func=cmd_resume_parse)

    # Job
    job_parser = subparsers.add_parser("job", help="Job posting commands")
    job_sub = job_parser.add_subparsers(dest="subcommand", required=True)
    scrape_cmd = job_sub.add_parser("scrape", help="Scrape a job posting URL")
    scrape_cmd.add_argument("--url", required=True, help="Job posting URL")
    scrape_cmd.add_argument("--out", required=True, help="Path to output JSON file")
    scrape_cmd.set_defaults(func=cmd_job_scrape)

    extract_cmd = job_sub.add_parser("extract", help="Structure a saved job page")
    extract_cmd.add_argument("--html", required=True, help="Path to the saved HTML page")
    extract_cmd.add_argument("--url", default=None, help="URL the page was saved from (selects the site strategy)")
    extract_cmd.add_argument("--out", required=True, help="Path to output JSON file")
    extract_cmd.set_defaults(func=cmd_job_extract)

    validate_cmd = job_sub.add_parser("validate", help="Check whether a URL looks like a job posting")
    validate_cmd.add_argument("--url", required=True, help="URL to check")
    validate_cmd.set_defaults(func=cmd_job_validate)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    try:
        return args.func(args)
    except (ConfigError, DocumentError, JobScrapeError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
