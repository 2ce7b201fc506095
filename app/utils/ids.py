"""Identifier helpers."""

from uuid import uuid4


def generate_id() -> str:
    """Return a new opaque string identifier."""

    return uuid4().hex
