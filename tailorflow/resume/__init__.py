"""
Résumé extraction.

This package converts the unstructured text of a résumé into a
:class:`StructuredResume`: contact details, summary, work history,
education, categorised skills, certifications and projects.  The
parsing step is purely heuristic; the LLM-based extraction path lives
outside this package and consumes the same record shape.
"""

from .documents import DocumentError, PDFParseError, extract_text_from_file  # noqa: F401
from .parse_resume import (  # noqa: F401
    ParseState,
    ResumeStructureExtractor,
    extract_resume_structure,
    parse_resume,
    save_resume_json,
)
from .schema import StructuredResume  # noqa: F401
from .sections import Section, SectionClassifier  # noqa: F401
