"""Jinja integration for rendering node trees inside templates."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from .builder import flatten_children, is_child_sequence, normalize_child
from .io_utils import warn
from .nodes import FragmentNode, is_node
from .render import render


def render_markup(value: Any) -> Markup:
    """Render a node, or a sequence of children, as safe template markup."""

    if is_node(value):
        return Markup(render(value))
    if is_child_sequence(value):
        fragment = FragmentNode(tuple(normalize_child(item) for item in flatten_children(value)))
        return Markup(render(fragment))
    warn(f"vnode: expected a node or a list of children, got {type(value).__name__}; rendering as text")
    return Markup(render(normalize_child(value)))


def install_jinja(env: Environment, *, name: str = "vnode") -> Environment:
    """Register ``render_markup`` as a filter and a global named ``name``."""

    env.filters[name] = render_markup
    env.globals[name] = render_markup
    return env


__all__ = ["install_jinja", "render_markup"]
