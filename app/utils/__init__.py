"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    to_utc_isoformat,
)
from .ids import generate_id
from .text import format_short_date, slugify, to_normal_case

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_short_date",
    "generate_id",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "slugify",
    "to_normal_case",
    "to_utc_isoformat",
]
