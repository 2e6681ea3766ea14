"""
Rules adapter for the page render component.
"""

from __future__ import annotations

from src.rules.models import RenderRules, Rules


class RenderRulesAdapter:
    """Serves the `render` section of the loaded rules through RulesPort."""

    def __init__(self, rules: Rules | RenderRules) -> None:
        self._render = rules.render if isinstance(rules, Rules) else rules

    def get_raw_html_base_class(self) -> str:
        return self._render.raw_html.base_class

    def get_raw_html_instance_fallback(self) -> str:
        return self._render.raw_html.instance_fallback

    def get_required_marker(self) -> str:
        return self._render.forms.required_marker

    def get_submit_label(self) -> str:
        return self._render.forms.submit_label

    def get_fragment_separator(self) -> str:
        return self._render.fragment_separator

    def get_disabled_kinds(self) -> frozenset[str]:
        return frozenset(self._render.disabled_kinds)
