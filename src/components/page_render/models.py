"""
Page render component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# --- Validation Error ---


@dataclass(frozen=True)
class PageRenderValidationError:
    """Page render validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderComponentsInput:
    """Input for rendering an already-resolved component list."""

    components: Any


@dataclass(frozen=True)
class RenderTemplateInput:
    """Input for rendering a persisted template payload (object or JSON string)."""

    template_data: Any


@dataclass(frozen=True)
class ParseTemplateInput:
    """Input for normalizing a persisted template payload."""

    template_data: Any


# --- Output Models ---


@dataclass(frozen=True)
class RenderOutcome:
    """Per-component render result."""

    index: int
    kind: str | None
    status: str  # rendered, empty, unknown, error
    error: str | None = None


@dataclass(frozen=True)
class RenderOutput:
    """Output containing the rendered page fragment."""

    html: str
    outcomes: tuple[RenderOutcome, ...] = ()
    errors: list[PageRenderValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ParseOutput:
    """Output containing the normalized template payload."""

    payload: Mapping[str, Any] | None
    components: tuple[Any, ...] = ()
    template_id: str | None = None
    theme_id: str | None = None
    errors: list[PageRenderValidationError] = field(default_factory=list)
    success: bool = True
