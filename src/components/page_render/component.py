"""
Page render component - Render a page's component list to HTML.

Shared by the server-side page render and the editor preview.

Invariants:
- I1: Every props text/URL value is escaped; rich fields are the only
  verbatim output
- I2: Component order is preserved
- I3: One bad component never suppresses its siblings
- I4: Malformed template payloads render nothing instead of raising
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from src.core.services.page_render import (
    DEFAULT_REGISTRY,
    ComponentOutcome,
    PageRenderer,
    RenderConfig,
    RendererRegistry,
)
from src.core.services.template_data import extract_components, parse_template_data

from .models import (
    PageRenderValidationError,
    ParseOutput,
    ParseTemplateInput,
    RenderComponentsInput,
    RenderOutcome,
    RenderOutput,
    RenderTemplateInput,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> RenderConfig:
    """Build render config from rules port."""
    if rules is None:
        return RenderConfig()

    return RenderConfig(
        raw_html_base_class=rules.get_raw_html_base_class(),
        raw_html_instance_fallback=rules.get_raw_html_instance_fallback(),
        required_marker=rules.get_required_marker(),
        submit_label=rules.get_submit_label(),
        fragment_separator=rules.get_fragment_separator(),
    )


def _build_registry(rules: RulesPort | None) -> RendererRegistry:
    if rules is None:
        return DEFAULT_REGISTRY
    disabled = rules.get_disabled_kinds()
    if not disabled:
        return DEFAULT_REGISTRY
    return DEFAULT_REGISTRY.without(disabled)


def _create_renderer(rules: RulesPort | None) -> PageRenderer:
    return PageRenderer(config=_build_config(rules), registry=_build_registry(rules))


def _normalize_components(components: list[Any] | tuple[Any, ...]) -> list[Any]:
    """Validated pydantic component models render exactly like their wire dicts."""
    return [
        component.model_dump() if isinstance(component, BaseModel) else component
        for component in components
    ]


def _convert_outcomes(outcomes: list[ComponentOutcome]) -> tuple[RenderOutcome, ...]:
    return tuple(
        RenderOutcome(index=o.index, kind=o.kind, status=o.status, error=o.error)
        for o in outcomes
    )


def _outcome_errors(outcomes: list[ComponentOutcome]) -> list[PageRenderValidationError]:
    return [
        PageRenderValidationError(
            code="render_error",
            message=f"Component '{o.kind}' failed to render: {o.error}",
            field=f"components[{o.index}]",
        )
        for o in outcomes
        if o.status == "error"
    ]


def _render_list(components: Any, renderer: PageRenderer) -> RenderOutput:
    if components is None:
        return RenderOutput(html="")

    if not isinstance(components, (list, tuple)):
        return RenderOutput(
            html="",
            errors=[
                PageRenderValidationError(
                    code="invalid_components",
                    message=f"Expected a list of components, got {type(components).__name__}",
                    field="components",
                )
            ],
            success=False,
        )

    outcomes = renderer.render_outcomes(_normalize_components(components))
    return RenderOutput(
        html=renderer.join(outcomes),
        outcomes=_convert_outcomes(outcomes),
        errors=_outcome_errors(outcomes),
        success=True,
    )


# --- Component Entry Points ---


def run_render(
    inp: RenderComponentsInput,
    *,
    rules: RulesPort | None = None,
) -> RenderOutput:
    """
    Render a component list to an HTML fragment.

    Args:
        inp: Input containing the ordered component list.
        rules: Optional rules port for configuration.

    Returns:
        RenderOutput with HTML and one outcome per component. Components
        that failed are also listed in errors; the page still renders.
    """
    return _render_list(inp.components, _create_renderer(rules))


def run_parse(inp: ParseTemplateInput) -> ParseOutput:
    """
    Normalize a persisted template payload.

    Args:
        inp: Input containing the raw payload (object or JSON string).

    Returns:
        ParseOutput with the payload, or success=False if it was present
        but could not be decoded.
    """
    payload = parse_template_data(inp.template_data)

    if payload is None:
        if inp.template_data is None:
            return ParseOutput(payload=None)
        return ParseOutput(
            payload=None,
            errors=[
                PageRenderValidationError(
                    code="invalid_template_data",
                    message="Template data is not a JSON object",
                    field="template_data",
                )
            ],
            success=False,
        )

    template_id = payload.get("template_id")
    theme_id = payload.get("theme_id")
    return ParseOutput(
        payload=payload,
        components=tuple(extract_components(payload)),
        template_id=template_id if isinstance(template_id, str) else None,
        theme_id=theme_id if isinstance(theme_id, str) else None,
    )


def run_render_template(
    inp: RenderTemplateInput,
    *,
    rules: RulesPort | None = None,
) -> RenderOutput:
    """
    Parse and render a persisted template payload.

    An undecodable payload renders to "" with success=False so the caller
    can fall back to another content field.
    """
    parsed = run_parse(ParseTemplateInput(template_data=inp.template_data))
    if not parsed.success:
        return RenderOutput(html="", errors=parsed.errors, success=False)

    return _render_list(list(parsed.components), _create_renderer(rules))


def run(
    inp: RenderComponentsInput | RenderTemplateInput | ParseTemplateInput,
    *,
    rules: RulesPort | None = None,
) -> RenderOutput | ParseOutput:
    """
    Main entry point for the page render component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderComponentsInput):
        return run_render(inp, rules=rules)
    elif isinstance(inp, RenderTemplateInput):
        return run_render_template(inp, rules=rules)
    elif isinstance(inp, ParseTemplateInput):
        return run_parse(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
