"""Template rendering against workflow state."""

from email_notify.rendering.template import (
    Literal,
    Placeholder,
    Segment,
    iter_segments,
    render_template,
    template_variables,
)

__all__ = [
    "Literal",
    "Placeholder",
    "Segment",
    "iter_segments",
    "render_template",
    "template_variables",
]
