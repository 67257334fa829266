"""Positional ``{}`` message templating."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

PLACEHOLDER = "{}"
_ESCAPE = "\\"


def render(template: str | None, parameters: Sequence[Any] | None) -> str | None:
    """Substitute ``parameters`` into the ``{}`` markers of ``template``, in order.

    Mismatched counts never fail: markers without a parameter stay literal and
    surplus parameters are ignored. ``\\{}`` yields a literal ``{}`` and
    ``\\\\{}`` a literal backslash followed by the parameter.
    """
    if template is None:
        return None
    if parameters is None:
        return template

    chunks: list[str] = []
    cursor = 0
    index = 0
    while index < len(parameters):
        marker = template.find(PLACEHOLDER, cursor)
        if marker == -1:
            break

        escaped = marker > 0 and template[marker - 1] == _ESCAPE
        double_escaped = escaped and marker > 1 and template[marker - 2] == _ESCAPE
        if escaped and not double_escaped:
            chunks.append(template[cursor : marker - 1])
            chunks.append("{")
            cursor = marker + 1
            continue

        if double_escaped:
            chunks.append(template[cursor : marker - 1])
        else:
            chunks.append(template[cursor:marker])
        chunks.append(str(parameters[index]))
        cursor = marker + len(PLACEHOLDER)
        index += 1

    chunks.append(template[cursor:])
    return "".join(chunks)


__all__ = ["PLACEHOLDER", "render"]
