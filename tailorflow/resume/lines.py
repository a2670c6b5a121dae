"""Line normalisation shared by the résumé extractors."""

from __future__ import annotations

from typing import Iterator


def iter_lines(text: object) -> Iterator[str]:
    """Yield the trimmed, non-empty lines of ``text`` in order.

    ``None``, empty strings and non-string values yield nothing; callers
    treat an exhausted iterator as "nothing extractable".
    """
    if not text or not isinstance(text, str):
        return
    for line in text.splitlines():
        line = line.strip()
        if line:
            yield line
