"""
Page render component - Component list to HTML for SSR and editor preview.
"""

from src.core.services.css_scope import (
    make_scope_class,
    scope_css,
    scope_selectors,
    scope_styles,
)
from src.core.services.page_render import (
    ALIASES,
    BASE_RENDERERS,
    DEFAULT_REGISTRY,
    DEFAULT_RENDER_CONFIG,
    PREMIUM_SHOWCASE_BASE,
    PREMIUM_SHOWCASE_KIND,
    RAW_HTML_PLACEHOLDER,
    ComponentOutcome,
    PageRenderer,
    RenderConfig,
    Renderer,
    RendererRegistry,
    build_default_registry,
    create_page_renderer,
    join_outcomes,
    render_all,
    render_component,
    render_outcomes,
    render_page,
)
from src.core.services.template_data import extract_components, parse_template_data
from src.domain.escape import escape_html

from .adapters.rules import RenderRulesAdapter
from .component import (
    run,
    run_parse,
    run_render,
    run_render_template,
)
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

__all__ = [
    # Entry points
    "run",
    "run_parse",
    "run_render",
    "run_render_template",
    # Input models
    "ParseTemplateInput",
    "RenderComponentsInput",
    "RenderTemplateInput",
    # Output models
    "ParseOutput",
    "RenderOutcome",
    "RenderOutput",
    "PageRenderValidationError",
    # Ports / adapters
    "RulesPort",
    "RenderRulesAdapter",
    # Service re-exports
    "ALIASES",
    "BASE_RENDERERS",
    "DEFAULT_REGISTRY",
    "DEFAULT_RENDER_CONFIG",
    "PREMIUM_SHOWCASE_BASE",
    "PREMIUM_SHOWCASE_KIND",
    "RAW_HTML_PLACEHOLDER",
    "ComponentOutcome",
    "PageRenderer",
    "RenderConfig",
    "Renderer",
    "RendererRegistry",
    "build_default_registry",
    "create_page_renderer",
    "join_outcomes",
    "render_all",
    "render_component",
    "render_outcomes",
    "render_page",
    # Scoping
    "make_scope_class",
    "scope_css",
    "scope_selectors",
    "scope_styles",
    # Parsing / escaping
    "escape_html",
    "extract_components",
    "parse_template_data",
]
