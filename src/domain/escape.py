from typing import Any

# Order matters: "&" first so later entities are not re-escaped.
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def to_text(value: Any) -> str:
    """
    Stringify a props value the way stored pages show it.

    Booleans are lowercase and whole-number floats drop their ".0", so a
    price of 9.0 reads "9".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_html(value: Any) -> str:
    """
    Escape a value for interpolation into HTML text or a quoted attribute.

    None becomes an empty string; anything else is stringified first.
    Apply exactly once, at the point of interpolation.
    """
    if value is None:
        return ""

    text = to_text(value)
    for char, entity in _REPLACEMENTS:
        text = text.replace(char, entity)
    return text
