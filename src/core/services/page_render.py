"""
Page Component Renderer - Render a page's component list to HTML.

Used by both the server-side page render and the editor preview, so the
same component list always produces the same markup.

Key behaviors:
- One pure render function per component kind
- Wrapper classes and tags match the site stylesheets exactly
- Every text and URL field is escaped; only rich fields (text-block and
  content-section `content`, cyber-super-card `content`, raw-html `html`)
  are emitted verbatim
- URL fields are escaped but not scheme-checked
- Unknown kinds and failing renderers degrade to an HTML comment for that
  one component; the rest of the page still renders
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

from src.core.services.css_scope import make_scope_class, scope_styles
from src.core.services.template_data import extract_components, parse_template_data
from src.domain.escape import escape_html
from src.domain.props import first_truthy, get_id, get_item, get_kind, get_list, get_props

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class RenderConfig:
    """Rendering configuration."""

    raw_html_base_class: str = "raw-html-block"
    raw_html_instance_fallback: str = "instance"
    required_marker: str = " *"
    # Shipped pages use this label; it is not localized.
    submit_label: str = "提交"
    fragment_separator: str = "\n\n"


DEFAULT_RENDER_CONFIG = RenderConfig()

Renderer = Callable[[Mapping[str, Any], RenderConfig], str]

RAW_HTML_PLACEHOLDER = (
    '<div class="raw-html-placeholder">'
    "<p>Paste custom HTML here. Notes:</p>"
    "<ul>"
    "<li>Reference assets with accessible URLs, e.g. /uploads/xxx or https://...</li>"
    "<li>Avoid global selectors such as body/html/*; styles are scoped automatically</li>"
    "<li>Do not include &lt;script&gt;; only static HTML/CSS is supported</li>"
    "</ul>"
    "</div>"
)


# --- Markup Helpers ---


def wrap_section(class_name: str, inner: str) -> str:
    return f'<section class="{class_name}">{inner}</section>'


def render_heading(tag: str, text: Any) -> str:
    if not text:
        return ""
    return f"<{tag}>{escape_html(text)}</{tag}>"


def render_paragraph(text: Any) -> str:
    if not text:
        return ""
    return f"<p>{escape_html(text)}</p>"


def render_list(items: Any) -> str:
    if not isinstance(items, (list, tuple)) or not items:
        return ""
    inner = "".join(f"<li>{escape_html(item)}</li>" for item in items)
    return f"<ul>{inner}</ul>"


def render_image(src: Any, alt: Any) -> str:
    if not src:
        return ""
    return f'<img src="{escape_html(src)}" alt="{escape_html(alt or "")}" />'


def render_link_button(class_name: str, text: Any, href: Any) -> str:
    if not text:
        return ""
    return f'<a class="{class_name}" href="{escape_html(href or "#")}">{escape_html(text)}</a>'


def _section_header(props: Mapping[str, Any]) -> str:
    return render_heading("h2", props.get("title")) + render_paragraph(props.get("subtitle"))


def _items(props: Mapping[str, Any], name: str) -> Iterator[Mapping[str, Any]]:
    for item in get_list(props, name):
        yield get_item(item)


# --- Basic Renderers ---


def render_hero(component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
    p = get_props(component)
    background = p.get("backgroundImage")
    bg = f" style=\"background-image:url('{escape_html(background)}')\"" if background else ""
    button = render_link_button("hero-button", p.get("buttonText"), p.get("buttonLink"))
    return wrap_section(
        "hero-section",
        f'<div class="hero-content"{bg}>'
        f'{render_heading("h1", p.get("title"))}{render_paragraph(p.get("subtitle"))}{button}'
        "</div>",
    )


def render_text_block(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    content = p.get("content")
    body = f'<div class="text-body">{content}</div>' if content else ""
    return wrap_section("text-block", f'{render_heading("h2", p.get("title"))}{body}')


def render_image_block(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    image = render_image(p.get("src"), p.get("alt"))
    link_url = p.get("linkUrl")
    if image and link_url:
        target = (
            ' target="_blank" rel="noopener noreferrer"' if p.get("linkTarget") == "_blank" else ""
        )
        image = f'<a href="{escape_html(link_url)}"{target}>{image}</a>'
    caption = p.get("caption")
    figcaption = f"<figcaption>{escape_html(caption)}</figcaption>" if caption else ""
    return wrap_section("image-block", f"<figure>{image}{figcaption}</figure>")


def render_image_text(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    image = p.get("image")
    image_part = (
        f'<div class="image-text__image">{render_image(image, p.get("imageAlt"))}</div>'
        if image
        else ""
    )
    side = "image-right" if p.get("align") == "right" else "image-left"
    return wrap_section(
        f"image-text {side}",
        f'{render_heading("h2", p.get("title"))}{render_paragraph(p.get("content"))}{image_part}',
    )


def render_image_text_horizontal(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    return wrap_section(
        "image-text-horizontal",
        f'<div class="image-text-horizontal__media">{render_image(p.get("image"), p.get("imageAlt"))}</div>'
        '<div class="image-text-horizontal__content">'
        f'{render_heading("h2", p.get("title"))}{render_paragraph(p.get("content"))}'
        "</div>",
    )


def render_content_section(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    content = p.get("content")
    body = f'<div class="content-body">{content}</div>' if content else ""
    return wrap_section("content-section", f"{_section_header(p)}{body}")


def render_banner_carousel(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    banners = get_list(p, "banners") or get_list(p, "slides")
    slides = []
    for banner in banners:
        b = get_item(banner)
        slides.append(
            '<div class="banner-slide">'
            f'{render_image(first_truthy(b, "image", "src"), b.get("alt"))}'
            f'{render_heading("h3", b.get("title"))}{render_paragraph(b.get("description"))}'
            "</div>"
        )
    return wrap_section("banner-carousel", "".join(slides) or '<div class="banner-slide empty"></div>')


# --- Collection Renderers ---


def render_feature_grid(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = "".join(
        '<div class="feature-item">'
        f'{render_heading("h3", f.get("title"))}{render_paragraph(f.get("description"))}'
        "</div>"
        for f in _items(p, "features")
    )
    return wrap_section(
        "feature-grid", f'{_section_header(p)}<div class="feature-grid__items">{items}</div>'
    )


def render_service_grid(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = "".join(
        '<div class="service-card">'
        f'{render_heading("h3", s.get("title"))}{render_paragraph(s.get("description"))}'
        "</div>"
        for s in _items(p, "services")
    )
    return wrap_section(
        "service-grid", f'{_section_header(p)}<div class="service-grid__items">{items}</div>'
    )


def _logo_source(logo: Any) -> tuple[Any, Any]:
    """Logos are stored as URL strings or {image|url, alt} objects."""
    if isinstance(logo, str):
        return logo, "logo"
    if isinstance(logo, Mapping):
        return first_truthy(logo, "image", "url"), logo.get("alt") or "logo"
    return None, "logo"


def _render_logos(props: Mapping[str, Any], item_class: str) -> str:
    parts = []
    for logo in get_list(props, "logos"):
        src, alt = _logo_source(logo)
        parts.append(f'<div class="{item_class}">{render_image(src, alt)}</div>')
    return "".join(parts)


def render_logo_wall(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = _render_logos(p, "logo-item")
    return wrap_section("logo-wall", f'<div class="logo-wall__items">{items}</div>')


def render_logo_scroll(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = _render_logos(p, "logo-scroll__item")
    return wrap_section("logo-scroll", f'<div class="logo-scroll__track">{items}</div>')


def render_link_block(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = "".join(
        f'<li><a href="{escape_html(link.get("href") or "#")}">'
        f'{escape_html(first_truthy(link, "label", "text") or "")}</a></li>'
        for link in _items(p, "links")
    )
    return wrap_section(
        "link-block", f'{render_heading("h3", p.get("title"))}<ul class="link-block__list">{items}</ul>'
    )


# --- Pricing / Forms ---


def render_pricing_cards(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    cards = []
    for plan in _items(p, "plans"):
        css_class = "price-card price-card--featured" if plan.get("recommended") else "price-card"
        period = plan.get("period")
        per = f"/{escape_html(period)}" if period else ""
        cards.append(
            f'<div class="{css_class}">'
            f'{render_heading("h3", plan.get("name"))}'
            f'<div class="price-card__price">{escape_html(plan.get("price") or "0")}{per}</div>'
            f'{render_list(plan.get("features"))}'
            "</div>"
        )
    return wrap_section(
        "pricing-section", f'{_section_header(p)}<div class="pricing-grid">{"".join(cards)}</div>'
    )


def render_contact_form(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    """Static, non-functional form; submission is wired up by the page shell."""
    p = get_props(component)
    inputs = []
    for field in _items(p, "fields"):
        required = bool(field.get("required"))
        marker = escape_html(config.required_marker) if required else ""
        req_attr = " required" if required else ""
        label = f'<label>{escape_html(first_truthy(field, "label", "name") or "")}{marker}</label>'
        name = escape_html(field.get("name") or "")
        field_type = field.get("type")
        if field_type == "textarea":
            control = f'<textarea name="{name}"{req_attr}></textarea>'
        else:
            control = f'<input type="{escape_html(field_type or "text")}" name="{name}"{req_attr} />'
        inputs.append(f'<div class="form-group">{label}{control}</div>')
    submit = f'<button type="submit">{escape_html(config.submit_label)}</button>'
    return wrap_section("contact-form", f'{_section_header(p)}<form>{"".join(inputs)}{submit}</form>')


def render_faq_section(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = "".join(
        '<div class="faq-item">'
        f'{render_heading("h3", faq.get("question"))}{render_paragraph(faq.get("answer"))}'
        "</div>"
        for faq in _items(p, "faqs")
    )
    return wrap_section("faq-section", f"{_section_header(p)}{items}")


# --- Team / Testimonials ---


def render_team_grid(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    members = []
    for member in _items(p, "members"):
        role = member.get("role")
        role_html = f'<p class="team-member__role">{escape_html(role)}</p>' if role else ""
        members.append(
            '<div class="team-member">'
            f'{render_image(member.get("avatar"), member.get("name"))}'
            f'{render_heading("h3", member.get("name"))}{role_html}'
            f'{render_paragraph(member.get("bio"))}'
            "</div>"
        )
    return wrap_section(
        "team-grid", f'{_section_header(p)}<div class="team-grid__items">{"".join(members)}</div>'
    )


def render_testimonials(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    quotes = []
    for t in _items(p, "testimonials"):
        author = t.get("author")
        cite = f"<cite>{escape_html(author)}</cite>" if author else ""
        quotes.append(f'<blockquote class="testimonial">{render_paragraph(t.get("quote"))}{cite}</blockquote>')
    return wrap_section("testimonials", f'{_section_header(p)}{"".join(quotes)}')


# --- Call To Action ---


def render_call_to_action(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    color = p.get("backgroundColor")
    style = f' style="background-color:{escape_html(color)}"' if color else ""
    button = render_link_button("cta-button", p.get("buttonText"), p.get("buttonLink"))
    return wrap_section(
        "call-to-action", f'<div class="cta-content"{style}>{_section_header(p)}{button}</div>'
    )


# --- Stats / Timeline ---


def render_stats_section(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    items = "".join(
        '<div class="stat-item">'
        f'{render_heading("h3", s.get("label"))}'
        f'<p class="stat-value">{escape_html(s.get("value") or "")}</p>'
        f'{render_paragraph(s.get("description"))}'
        "</div>"
        for s in _items(p, "stats")
    )
    return wrap_section("stats-section", f'{_section_header(p)}<div class="stats-grid">{items}</div>')


def render_timeline(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    entries = []
    for event in _items(p, "events"):
        date = event.get("date")
        date_html = f'<p class="timeline-date">{escape_html(date)}</p>' if date else ""
        entries.append(
            '<div class="timeline-item">'
            f'{render_heading("h3", event.get("title"))}{date_html}'
            f'{render_paragraph(event.get("description"))}'
            "</div>"
        )
    return wrap_section(
        "timeline", f'{_section_header(p)}<div class="timeline-items">{"".join(entries)}</div>'
    )


# --- Cyber ---


def render_cyber_showcase(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    cards = "".join(
        '<div class="cyber-showcase__item">'
        f'{render_heading("h3", item.get("title"))}{render_paragraph(item.get("description"))}'
        f'{render_image(item.get("image"), item.get("title"))}'
        "</div>"
        for item in _items(p, "items")
    )
    return wrap_section(
        "cyber-showcase", f'{_section_header(p)}<div class="cyber-showcase__grid">{cards}</div>'
    )


def render_cyber_super_card(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    content = p.get("content")
    body = f'<div class="cyber-super-card__content">{content}</div>' if content else ""
    return wrap_section(
        "cyber-super-card",
        '<div class="cyber-super-card__body">'
        f'{_section_header(p)}{body}{render_image(p.get("image"), p.get("title"))}'
        "</div>",
    )


# --- News / Video ---


def render_news_list(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    articles = []
    for news in _items(p, "items"):
        date = news.get("date")
        date_html = f'<p class="news-date">{escape_html(date)}</p>' if date else ""
        articles.append(
            '<article class="news-item">'
            f'{render_heading("h3", news.get("title"))}{date_html}'
            f'{render_paragraph(first_truthy(news, "excerpt", "summary"))}'
            "</article>"
        )
    return wrap_section("news-list", f'{_section_header(p)}{"".join(articles)}')


def render_video_player(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    p = get_props(component)
    poster = p.get("poster")
    poster_attr = f' poster="{escape_html(poster)}"' if poster else ""
    url = p.get("url")
    source = f'<source src="{escape_html(url)}" />' if url else ""
    return wrap_section(
        "video-player",
        f'{render_heading("h2", p.get("title"))}{render_paragraph(p.get("description"))}'
        f"<video controls{poster_attr}>{source}</video>",
    )


# --- Raw HTML ---


def render_raw_html(
    component: Mapping[str, Any], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    """
    Author-supplied HTML, with its <style> rules scoped to this instance.

    The wrapper carries both the base class and a per-instance class built
    from the component id, so two raw-html blocks never share styles.
    """
    p = get_props(component)
    html = p.get("html") or ""
    if not isinstance(html, str):
        html = str(html)
    base_class = str(p.get("className") or config.raw_html_base_class)
    instance = get_id(component) or config.raw_html_instance_fallback
    unique_class = make_scope_class(base_class, str(instance))

    scoped = scope_styles(html, unique_class)
    content = scoped if scoped.strip() else RAW_HTML_PLACEHOLDER
    return wrap_section(f"{escape_html(base_class)} {unique_class} raw-html-section", content)


# --- Registry ---


class RendererRegistry:
    """Immutable mapping from component kind to render function."""

    def __init__(self, renderers: Mapping[str, Renderer]) -> None:
        self._renderers: Mapping[str, Renderer] = MappingProxyType(dict(renderers))

    def get(self, kind: str | None) -> Renderer | None:
        if kind is None:
            return None
        return self._renderers.get(kind)

    def kinds(self) -> frozenset[str]:
        return frozenset(self._renderers)

    def __contains__(self, kind: object) -> bool:
        return kind in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)

    def extend(self, renderers: Mapping[str, Renderer]) -> RendererRegistry:
        """New registry with extra or replacement renderers."""
        merged = dict(self._renderers)
        merged.update(renderers)
        return RendererRegistry(merged)

    def without(self, kinds: Iterable[str]) -> RendererRegistry:
        """New registry with the given kinds removed."""
        excluded = set(kinds)
        return RendererRegistry(
            {kind: fn for kind, fn in self._renderers.items() if kind not in excluded}
        )


BASE_RENDERERS: dict[str, Renderer] = {
    "hero": render_hero,
    "text-block": render_text_block,
    "image-block": render_image_block,
    "image-text": render_image_text,
    "image-text-horizontal": render_image_text_horizontal,
    "content-section": render_content_section,
    "banner-carousel": render_banner_carousel,
    "feature-grid": render_feature_grid,
    "pricing-cards": render_pricing_cards,
    "contact-form": render_contact_form,
    "team-grid": render_team_grid,
    "call-to-action": render_call_to_action,
    "faq-section": render_faq_section,
    "stats-section": render_stats_section,
    "timeline": render_timeline,
    "cyber-showcase": render_cyber_showcase,
    "cyber-super-card": render_cyber_super_card,
    "testimonials": render_testimonials,
    "news-list": render_news_list,
    "service-grid": render_service_grid,
    "logo-wall": render_logo_wall,
    "logo-scroll": render_logo_scroll,
    "link-block": render_link_block,
    "video-player": render_video_player,
    "raw-html": render_raw_html,
}

# alias kind -> base kind; rendered with the base function, props unchanged
ALIASES: dict[str, str] = {
    "premium-hero": "hero",
    "premium-feature-grid": "feature-grid",
    "feature-grid-large": "feature-grid",
    "premium-stats": "stats-section",
    "premium-testimonials": "testimonials",
    "premium-partners": "team-grid",
    "premium-pricing": "pricing-cards",
    "cyber-timeline": "timeline",
}

# premium-showcase renders as text-block, not cyber-showcase. Stored pages
# depend on this output; pending product confirmation before changing it.
PREMIUM_SHOWCASE_KIND = "premium-showcase"
PREMIUM_SHOWCASE_BASE = "text-block"


def build_default_registry() -> RendererRegistry:
    renderers: dict[str, Renderer] = dict(BASE_RENDERERS)
    for alias, base in ALIASES.items():
        renderers[alias] = BASE_RENDERERS[base]
    renderers[PREMIUM_SHOWCASE_KIND] = BASE_RENDERERS[PREMIUM_SHOWCASE_BASE]
    return RendererRegistry(renderers)


DEFAULT_REGISTRY = build_default_registry()


# --- Dispatch ---

OutcomeStatus = Literal["rendered", "empty", "unknown", "error"]


@dataclass(frozen=True)
class ComponentOutcome:
    """Result of rendering one component of the list."""

    index: int
    kind: str | None
    status: OutcomeStatus
    html: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "rendered"

    def to_fragment(self) -> str:
        """Markup for the page: the HTML, or an inert comment marker."""
        label = escape_html(self.kind)
        if self.status == "rendered":
            return self.html
        if self.status == "unknown":
            return f"<!-- Unknown component: {label} -->"
        if self.status == "empty":
            return f"<!-- Empty component: {label} -->"
        return f"<!-- Render error: {label} -->"


def render_component(
    component: Any,
    index: int = 0,
    registry: RendererRegistry = DEFAULT_REGISTRY,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> ComponentOutcome:
    """Render one component. Never raises."""
    kind = get_kind(component)
    renderer = registry.get(kind)
    if renderer is None:
        return ComponentOutcome(index=index, kind=kind, status="unknown")

    try:
        html = renderer(component, config)
    except Exception as e:
        logger.exception("Component render failed: %s (index %d)", kind, index)
        return ComponentOutcome(
            index=index, kind=kind, status="error", error=f"{type(e).__name__}: {e}"
        )

    if not html:
        return ComponentOutcome(index=index, kind=kind, status="empty")
    return ComponentOutcome(index=index, kind=kind, status="rendered", html=html)


def render_outcomes(
    components: Any,
    registry: RendererRegistry = DEFAULT_REGISTRY,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> list[ComponentOutcome]:
    if not isinstance(components, (list, tuple)):
        return []
    return [
        render_component(component, index, registry, config)
        for index, component in enumerate(components)
    ]


def join_outcomes(
    outcomes: list[ComponentOutcome], config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> str:
    return config.fragment_separator.join(outcome.to_fragment() for outcome in outcomes)


def render_all(
    components: Any,
    registry: RendererRegistry = DEFAULT_REGISTRY,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> str:
    """
    Render a page's component list to one HTML fragment.

    Empty or non-list input renders to "". Component order is preserved.
    """
    return join_outcomes(render_outcomes(components, registry, config), config)


def render_page(
    raw_template_data: Any,
    registry: RendererRegistry = DEFAULT_REGISTRY,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> str:
    """Parse a persisted template payload and render its components."""
    payload = parse_template_data(raw_template_data)
    return render_all(extract_components(payload), registry, config)


# --- Page Renderer Service ---


class PageRenderer:
    """
    Page renderer service.

    Holds one registry and config so SSR and preview share a single setup.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        registry: RendererRegistry | None = None,
    ) -> None:
        self._config = config or DEFAULT_RENDER_CONFIG
        self._registry = registry or DEFAULT_REGISTRY

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def registry(self) -> RendererRegistry:
        return self._registry

    def render(self, components: Any) -> str:
        return render_all(components, self._registry, self._config)

    def render_outcomes(self, components: Any) -> list[ComponentOutcome]:
        return render_outcomes(components, self._registry, self._config)

    def join(self, outcomes: list[ComponentOutcome]) -> str:
        return join_outcomes(outcomes, self._config)

    def render_page(self, raw_template_data: Any) -> str:
        return render_page(raw_template_data, self._registry, self._config)


# --- Factory ---


def create_page_renderer(
    config: RenderConfig | None = None,
    registry: RendererRegistry | None = None,
) -> PageRenderer:
    """Create a PageRenderer."""
    return PageRenderer(config=config, registry=registry)
