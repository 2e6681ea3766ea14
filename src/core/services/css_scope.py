"""
Raw HTML style scoping.

Confines author-supplied CSS to a wrapper class so a pasted raw-html block
cannot restyle the rest of the page.

Key behaviors:
- Every selector inside <style> blocks is prefixed with ".<scope> "
- Selectors that already mention the scope class are left alone
- @media / @supports bodies are scoped recursively
- @keyframes / @font-face bodies are kept verbatim
- Markup outside <style> is never touched
- Not a sanitizer: <script> is passed through
"""

from __future__ import annotations

import hashlib
import logging
import re

logger = logging.getLogger(__name__)

# A <style> left open runs to the end of the fragment.
STYLE_BLOCK_PATTERN = re.compile(
    r"<style\b([^>]*)>(.*?)(?:</style\s*>|\Z)", re.IGNORECASE | re.DOTALL
)
LEADING_COMMENTS_PATTERN = re.compile(r"^\s*(?:/\*.*?\*/\s*)*", re.DOTALL)
CLASS_UNSAFE_PATTERN = re.compile(r"[^A-Za-z0-9_-]+")

# At-rules whose body is itself a rule list.
NESTED_AT_RULES = frozenset(["media", "supports", "container", "layer", "document"])


def make_scope_class(base_class: str, instance_id: str) -> str:
    """
    Build the per-instance wrapper class, e.g. raw-html-block-c42.

    Ids that are not already class-safe get a short digest suffix, so
    "a.b" and "a-b" still map to different classes.
    """
    raw = f"{base_class}-{instance_id}"
    safe = CLASS_UNSAFE_PATTERN.sub("-", raw).strip("-") or "raw-html-block"
    if safe == raw:
        return safe
    digest = hashlib.sha256(raw.encode("utf-8")).hexdigest()[:8]
    return f"{safe}-{digest}"


def _targets_scope(selector: str, scope_class: str) -> bool:
    return re.search(rf"\.{re.escape(scope_class)}(?![\w-])", selector) is not None


def _find_block_end(css: str, open_index: int) -> int:
    """Index of the brace closing the one at open_index, or len(css)."""
    depth = 0
    for i in range(open_index, len(css)):
        char = css[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
    return len(css)


def _split_selectors(selectors: str) -> list[str]:
    """Split a selector list on top-level commas (not inside :is(a, b))."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in selectors:
        if char in "([":
            depth += 1
        elif char in ")]":
            depth = max(0, depth - 1)
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def scope_selectors(selectors: str, scope_class: str) -> str:
    """Prefix each selector of a comma-separated list with the scope class."""
    scoped = []
    for selector in _split_selectors(selectors):
        trimmed = selector.strip()
        if not trimmed:
            continue
        if _targets_scope(trimmed, scope_class):
            scoped.append(trimmed)
        else:
            scoped.append(f".{scope_class} {trimmed}")
    return ", ".join(scoped)


def scope_css(css: str, scope_class: str) -> str:
    """Rewrite a stylesheet so every rule only matches inside scope_class."""
    out: list[str] = []
    pos = 0

    while pos < len(css):
        brace = css.find("{", pos)
        if brace == -1:
            out.append(css[pos:])
            break

        prelude = css[pos:brace]

        # Block-less statements (@import ...;) before this rule stay as-is
        semi = prelude.rfind(";")
        if semi != -1:
            out.append(prelude[: semi + 1])
            prelude = prelude[semi + 1 :]

        end = _find_block_end(css, brace)
        body = css[brace + 1 : end]
        closing = "}" if end < len(css) else ""

        lead_match = LEADING_COMMENTS_PATTERN.match(prelude)
        lead = lead_match.group(0) if lead_match else ""
        head = prelude[len(lead) :]

        if head.startswith("@"):
            name = re.split(r"[\s({]", head[1:], maxsplit=1)[0].lower()
            if name in NESTED_AT_RULES:
                body = scope_css(body, scope_class)
            out.append(f"{lead}{head}{{{body}{closing}")
        elif head.strip():
            out.append(f"{lead}{scope_selectors(head, scope_class)} {{{body}{closing}")
        else:
            out.append(f"{prelude}{{{body}{closing}")

        pos = end + 1

    return "".join(out)


def strip_style_blocks(html: str) -> str:
    return STYLE_BLOCK_PATTERN.sub("", html)


def scope_styles(html: str, scope_class: str) -> str:
    """
    Scope all <style> blocks in an HTML fragment to scope_class.

    Returns the input unchanged when it has no <style> block. If the CSS
    cannot be rewritten the style blocks are dropped instead of leaking
    unscoped rules into the page.
    """
    if not html or "<style" not in html.lower():
        return html

    def replace_block(match: re.Match[str]) -> str:
        attrs = match.group(1)
        css = match.group(2)
        return f"<style{attrs}>{scope_css(css, scope_class)}</style>"

    try:
        return STYLE_BLOCK_PATTERN.sub(replace_block, html)
    except Exception:
        logger.exception("Raw HTML scoping failed for %s; dropping styles", scope_class)
        return strip_style_blocks(html)
