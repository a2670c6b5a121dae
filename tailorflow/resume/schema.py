"""
Structured résumé records.

Every field has an empty default so a freshly constructed
``StructuredResume`` is the complete skeleton returned when nothing can
be extracted.  ``to_dict`` emits the camelCase keys consumed by the LLM
prompt layer and the history views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ContactInfo:
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedin": self.linkedin,
        }


@dataclass
class WorkExperience:
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "company": self.company,
            "position": self.position,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "bullets": list(self.bullets),
        }


@dataclass
class Education:
    school: str = ""
    degree: str = ""
    field: str = ""
    year: str = ""
    gpa: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "school": self.school,
            "degree": self.degree,
            "field": self.field,
            "year": self.year,
            "gpa": self.gpa,
        }


@dataclass
class Skills:
    """Skill buckets.

    Each bucket behaves as an insertion-ordered set: ``add`` ignores a
    value already present in that bucket.
    """

    technical: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    soft: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)

    def add(self, bucket: str, skill: str) -> None:
        values = getattr(self, bucket)
        if skill not in values:
            values.append(skill)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "technical": list(self.technical),
            "tools": list(self.tools),
            "soft": list(self.soft),
            "languages": list(self.languages),
        }


@dataclass
class Certification:
    name: str = ""
    issuer: str = ""
    year: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "issuer": self.issuer, "year": self.year}


@dataclass
class Project:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "technologies": list(self.technologies),
        }


@dataclass
class StructuredResume:
    """Résumé structure produced by the heuristic extractor."""

    contact_info: ContactInfo = field(default_factory=ContactInfo)
    professional_summary: str = ""
    work_experience: List[WorkExperience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    certifications: List[Certification] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "contactInfo": self.contact_info.to_dict(),
            "professionalSummary": self.professional_summary,
            "workExperience": [w.to_dict() for w in self.work_experience],
            "education": [e.to_dict() for e in self.education],
            "skills": self.skills.to_dict(),
            "certifications": [c.to_dict() for c in self.certifications],
            "projects": [p.to_dict() for p in self.projects],
        }
