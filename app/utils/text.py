"""Small text helpers used when rendering activity content."""

from __future__ import annotations

import re
from datetime import datetime

_WORD_SEPARATORS = re.compile(r"[\s_\-]+")


def to_normal_case(value: str | None) -> str:
    """Turn an enumerated slug such as ``in-progress`` into ``In Progress``."""

    if not value:
        return ""
    words = [word for word in _WORD_SEPARATORS.split(value.strip()) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def format_short_date(value: datetime) -> str:
    """Render ``value`` as ``Mar 5``."""

    return f"{value.strftime('%b')} {value.day}"


def slugify(value: str) -> str:
    """Return a lowercase, dash separated slug for ``value``."""

    slug = re.sub(r"[^a-z0-9]+", "-", value.strip().lower())
    return slug.strip("-")
