"""Utilities for safe structured logging fields."""

from __future__ import annotations

import hashlib
from typing import Any

from service_errors.errors import ErrorWithParameters

_MAX_CHAIN_DEPTH = 16


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Return a deterministic non-reversible token for log correlation fields."""
    text = str(value or "").strip()
    if not text:
        return f"{prefix}-missing"

    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:12]
    return f"{prefix}-{digest}"


def describe_cause_chain(error: BaseException) -> str:
    """Render an error and its explicit causes, outermost first, as ``a <- b <- c``."""
    links: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen and len(links) < _MAX_CHAIN_DEPTH:
        seen.add(id(current))
        name = type(current).__name__
        text = str(current)
        if not text:
            links.append(name)
        elif isinstance(current, ErrorWithParameters) or text.startswith(name):
            links.append(text)
        else:
            links.append(f"{name}: {text}")
        current = current.__cause__
    return " <- ".join(links)
