"""Canonical name handling shared by schemes, templates and request inputs."""

from __future__ import annotations

import re

MAX_NAME_LENGTH = 255

_DISALLOWED = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_name(name: str) -> str:
    """Strip characters outside ``[A-Za-z0-9_-]`` and truncate.

    Path separators and dots are removed, so the result is always a single
    safe path component.
    """
    return _DISALLOWED.sub("", name)[:MAX_NAME_LENGTH]


def canonical_name(stem: str) -> str:
    """Catalog key for a file stem: lowercased and sanitized."""
    return sanitize_name(stem.lower())
