"""
Accessors for the loosely-typed props bag of a page component.

Nothing in props is trusted: any field may be absent, None or the wrong
type. Accessors supply the per-kind default instead of raising.
"""

from collections.abc import Mapping
from typing import Any


def get_props(component: Any) -> Mapping[str, Any]:
    """Return the component's props, or an empty mapping."""
    if not isinstance(component, Mapping):
        return {}
    props = component.get("props")
    if isinstance(props, Mapping):
        return props
    return {}


def get_kind(component: Any) -> str | None:
    if not isinstance(component, Mapping):
        return None
    kind = component.get("type")
    return kind if isinstance(kind, str) else None


def get_id(component: Any) -> Any:
    if not isinstance(component, Mapping):
        return None
    return component.get("id")


def get_list(props: Mapping[str, Any], name: str) -> list[Any]:
    """List-valued field; absent or non-list values read as empty."""
    value = props.get(name)
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def get_item(item: Any) -> Mapping[str, Any]:
    """
    Entry of an object list (features, plans, members, ...).

    Non-object entries read as an empty mapping.

    Raises:
        TypeError: If the entry is null. The dispatcher turns this into a
            per-component render error.
    """
    if item is None:
        raise TypeError("Expected an object entry, got null")
    if not isinstance(item, Mapping):
        return {}
    return item


def first_truthy(props: Mapping[str, Any], *names: str) -> Any:
    """First truthy value among the given fields, else None."""
    for name in names:
        value = props.get(name)
        if value:
            return value
    return None
