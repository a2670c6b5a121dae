"""Structured job-posting record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

JOB_FIELDS = [
    "title", "company", "location", "description", "requirements",
    "responsibilities", "skills", "qualifications", "salary",
    "employmentType", "postedDate", "url", "source",
]


@dataclass
class StructuredJobPosting:
    title: str = ""
    company: str = ""
    location: str = ""
    description: str = ""
    requirements: List[str] = field(default_factory=list)
    responsibilities: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    qualifications: List[str] = field(default_factory=list)
    salary: str = ""
    employment_type: str = ""
    posted_date: str = ""
    url: str = ""
    source: str = ""            # 'linkedin' | 'indeed' | 'generic'

    def to_dict(self) -> Dict[str, object]:
        d = {
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "requirements": list(self.requirements),
            "responsibilities": list(self.responsibilities),
            "skills": list(self.skills),
            "qualifications": list(self.qualifications),
            "salary": self.salary,
            "employmentType": self.employment_type,
            "postedDate": self.posted_date,
            "url": self.url,
            "source": self.source,
        }
        return {k: d[k] for k in JOB_FIELDS}
