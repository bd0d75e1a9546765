"""Build virtual node trees and render them to escaped markup."""

from .builder import (
    ByComponent,
    ByTag,
    Component,
    Fragment,
    as_target,
    flatten_children,
    h,
    to_text,
)
from .io_utils import dumps_node, loads_node
from .jinja_ext import install_jinja, render_markup
from .models import node_from_payload, node_to_payload
from .nodes import ElementNode, FragmentNode, Node, TextNode
from .render import SELF_CLOSING, escape, render

__all__ = [
    "ByComponent",
    "ByTag",
    "Component",
    "ElementNode",
    "Fragment",
    "FragmentNode",
    "Node",
    "SELF_CLOSING",
    "TextNode",
    "as_target",
    "dumps_node",
    "escape",
    "flatten_children",
    "h",
    "install_jinja",
    "loads_node",
    "node_from_payload",
    "node_to_payload",
    "render",
    "render_markup",
    "to_text",
]
