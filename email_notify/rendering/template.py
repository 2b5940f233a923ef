"""Mustache-style `{{name}}` substitution for subject and message templates.

A template is split into a lazy sequence of segments by a single left to
right scan. Rendering joins the segments once, looking placeholders up in
the workflow state. Substituted values are never re-scanned, and a `{{`
with no closing `}}` after it is kept as literal text.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

OPEN = "{{"
CLOSE = "}}"


@dataclass(frozen=True)
class Literal:
    """Text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """A `{{name}}` token to be replaced by a state value."""

    name: str


Segment = Literal | Placeholder


def iter_segments(template: str) -> Iterator[Segment]:
    """Split a template into literal and placeholder segments.

    The enclosed name is taken verbatim. Empty literals are not emitted.
    """
    pos = 0
    while True:
        start = template.find(OPEN, pos)
        if start == -1:
            break
        end = template.find(CLOSE, start + len(OPEN))
        if end == -1:
            break
        if start > pos:
            yield Literal(template[pos:start])
        yield Placeholder(template[start + len(OPEN):end])
        pos = end + len(CLOSE)

    if pos < len(template):
        yield Literal(template[pos:])


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def render_template(state: Mapping[str, Any], template: str) -> str:
    """Substitute `{{name}}` tokens with values from the workflow state.

    Missing or None values render as an empty string. The state is only
    read.

    Args:
        state: Workflow state to read variables from
        template: Template text

    Returns:
        Rendered text
    """
    return "".join(
        segment.text if isinstance(segment, Literal) else _stringify(state.get(segment.name))
        for segment in iter_segments(template)
    )


def template_variables(template: str) -> list[str]:
    """Names referenced by a template, in order of first appearance."""
    names: list[str] = []
    for segment in iter_segments(template):
        if isinstance(segment, Placeholder) and segment.name not in names:
            names.append(segment.name)
    return names
