"""
Selector chains for job-posting HTML.

Job boards move their markup around, so each field is looked up with an
ordered chain of ``(css_selector, extractor)`` pairs.  The chain is
evaluated lazily and stops at the first value that is long enough to be
useful; if nothing qualifies the field is absent (``""``), never an
error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

from bs4 import BeautifulSoup

WHITESPACE_RE = re.compile(r"\s+")

Extractor = Callable[[BeautifulSoup, str], str]


def clean_text(text: object) -> str:
    """Collapse runs of whitespace (including non-breaking spaces) and trim."""
    if not text or not isinstance(text, str):
        return ""
    return WHITESPACE_RE.sub(" ", text.replace("\xa0", " ")).strip()


def html_to_text(html: object) -> str:
    if not html or not isinstance(html, str):
        return ""
    return clean_text(BeautifulSoup(html, "html.parser").get_text(" "))


def text_of(soup: BeautifulSoup, selector: str) -> str:
    """Text of every element matching ``selector``, concatenated."""
    return clean_text(" ".join(el.get_text(" ") for el in soup.select(selector)))


def first_text_of(soup: BeautifulSoup, selector: str) -> str:
    el = soup.select_one(selector)
    return clean_text(el.get_text(" ")) if el is not None else ""


def html_of(soup: BeautifulSoup, selector: str) -> str:
    """Inner HTML of the first element matching ``selector``."""
    el = soup.select_one(selector)
    return el.decode_contents() if el is not None else ""


@dataclass(frozen=True)
class SelectorChain:
    """Ordered candidates for one field.

    Attributes:
        candidates: ``(selector, extractor)`` pairs in priority order.
        min_length: Minimum length of the whitespace-normalised text for
            a value to be accepted.
        html: When true the extractors return HTML fragments and the
            length test is applied to their text content.
    """

    candidates: Tuple[Tuple[str, Extractor], ...]
    min_length: int = 1
    html: bool = False

    @classmethod
    def of(cls, selectors: Iterable[str], extractor: Extractor = text_of,
           min_length: int = 1, html: bool = False) -> "SelectorChain":
        return cls(tuple((s, extractor) for s in selectors), min_length, html)

    def __add__(self, other: "SelectorChain") -> "SelectorChain":
        return SelectorChain(self.candidates + other.candidates, self.min_length, self.html)


def resolve(soup: BeautifulSoup, chain: SelectorChain) -> str:
    """Return the first acceptable value produced by ``chain`` or ``""``."""
    for selector, extractor in chain.candidates:
        value = extractor(soup, selector)
        text = html_to_text(value) if chain.html else clean_text(value)
        if len(text) >= chain.min_length:
            return value if chain.html else text
    return ""
