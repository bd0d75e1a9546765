"""Serialize virtual node trees to escaped markup."""

from __future__ import annotations

from typing import Any, List, Mapping

from .builder import to_text
from .nodes import ElementNode, FragmentNode, Node, TextNode

SELF_CLOSING = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Ampersand first so later entities are not escaped again.
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
)


def escape(text: str) -> str:
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def _render_attrs(props: Mapping[str, Any]) -> str:
    parts = [f' {escape(name)}="{escape(to_text(value))}"' for name, value in props.items()]
    return "".join(parts)


def _render_element(node: ElementNode) -> str:
    parts: List[str] = [f"<{node.tag}{_render_attrs(node.props)}>"]
    if node.tag not in SELF_CLOSING:
        parts.extend(render(child) for child in node.children)
        parts.append(f"</{node.tag}>")
    return "".join(parts)


def render(node: Node) -> str:
    """Render a node and its descendants to a markup string."""
    if isinstance(node, TextNode):
        return escape(node.text)
    if isinstance(node, FragmentNode):
        return "".join(render(child) for child in node.children)
    return _render_element(node)


__all__ = ["SELF_CLOSING", "escape", "render"]
