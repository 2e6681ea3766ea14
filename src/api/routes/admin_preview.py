"""
Admin Preview API Routes.

Renders page components for the visual editor preview. Uses the same
component entry points as the server-side page render, so the preview is
byte-identical to the published page.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.deps import get_render_rules
from src.components.page_render import (
    ParseTemplateInput,
    RenderComponentsInput,
    RenderOutput,
    RulesPort,
    run_parse,
    run_render,
)

router = APIRouter()


# --- Request/Response Models ---


class ComponentsPreviewRequest(BaseModel):
    """Request to preview an in-editor component list."""

    # Kept loose on purpose: a malformed entry must render as a marker,
    # not reject the whole preview.
    components: list[Any] = Field(default_factory=list, description="Ordered page components")


class TemplatePreviewRequest(BaseModel):
    """Request to preview a persisted template payload."""

    template_data: dict[str, Any] | str | None = Field(
        default=None, description="Template payload, as an object or JSON string"
    )


class OutcomeResponse(BaseModel):
    index: int
    kind: str | None
    status: str
    error: str | None = None


class ComponentsPreviewResponse(BaseModel):
    """Preview response with rendered HTML."""

    html: str
    outcomes: list[OutcomeResponse]
    error_count: int


class TemplatePreviewResponse(BaseModel):
    """Template preview response."""

    html: str
    parsed: bool
    component_count: int
    template_id: str | None = None
    theme_id: str | None = None
    outcomes: list[OutcomeResponse]


# --- Helper Functions ---


def _outcomes(result: RenderOutput) -> list[OutcomeResponse]:
    return [
        OutcomeResponse(index=o.index, kind=o.kind, status=o.status, error=o.error)
        for o in result.outcomes
    ]


# --- Routes ---


@router.post("/components", response_model=ComponentsPreviewResponse)
def preview_components(
    request: ComponentsPreviewRequest,
    rules: RulesPort = Depends(get_render_rules),
) -> ComponentsPreviewResponse:
    """Render the editor's current component list."""
    result = run_render(RenderComponentsInput(components=request.components), rules=rules)

    return ComponentsPreviewResponse(
        html=result.html,
        outcomes=_outcomes(result),
        error_count=len(result.errors),
    )


@router.post("/template", response_model=TemplatePreviewResponse)
def preview_template(
    request: TemplatePreviewRequest,
    rules: RulesPort = Depends(get_render_rules),
) -> TemplatePreviewResponse:
    """
    Render a stored template payload.

    Undecodable payloads answer parsed=false with empty HTML, never a 5xx.
    """
    parsed = run_parse(ParseTemplateInput(template_data=request.template_data))
    if parsed.success:
        components = RenderComponentsInput(components=list(parsed.components))
        result = run_render(components, rules=rules)
    else:
        result = RenderOutput(html="", errors=parsed.errors, success=False)

    return TemplatePreviewResponse(
        html=result.html,
        parsed=parsed.success and parsed.payload is not None,
        component_count=len(parsed.components),
        template_id=parsed.template_id,
        theme_id=parsed.theme_id,
        outcomes=_outcomes(result),
    )
