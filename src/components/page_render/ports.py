"""
Page render component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing render rules configuration."""

    def get_raw_html_base_class(self) -> str:
        """Get default wrapper class for raw-html blocks."""
        ...

    def get_raw_html_instance_fallback(self) -> str:
        """Get instance suffix used when a raw-html block has no id."""
        ...

    def get_required_marker(self) -> str:
        """Get marker appended to required form field labels."""
        ...

    def get_submit_label(self) -> str:
        """Get contact form submit button label."""
        ...

    def get_fragment_separator(self) -> str:
        """Get separator placed between component fragments."""
        ...

    def get_disabled_kinds(self) -> frozenset[str]:
        """Get component kinds that must not render."""
        ...
