"""Functional construction API for virtual node trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Literal, Mapping, Optional, Union

from .nodes import ElementNode, FragmentNode, Node, TextNode, is_node

Props = Mapping[str, Any]
Component = Callable[[Dict[str, Any]], Node]


@dataclass(frozen=True)
class ByTag:
    """Build an element with a literal tag name."""

    name: str
    kind: Literal["tag"] = field(default="tag", init=False, repr=False)


@dataclass(frozen=True)
class ByComponent:
    """Delegate construction to a component function."""

    fn: Component
    kind: Literal["component"] = field(default="component", init=False, repr=False)


Target = Union[ByTag, ByComponent]


def as_target(tag: Union[str, Component, Target]) -> Target:
    """Resolve a tag argument to an explicit construction target."""
    if isinstance(tag, (ByTag, ByComponent)):
        return tag
    if isinstance(tag, str):
        return ByTag(tag)
    return ByComponent(tag)


def to_text(value: Any) -> str:
    """Convert any value to text; ``None`` becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def is_child_sequence(item: Any) -> bool:
    """True for iterables of children; text, bytes and mappings are single values."""
    if is_node(item) or isinstance(item, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(item, Iterable)


def flatten_children(items: Iterable[Any]) -> List[Any]:
    """Flatten nested iterables of children into one ordered list."""
    flat: List[Any] = []
    pending = list(items)
    pending.reverse()
    while pending:
        item = pending.pop()
        if is_child_sequence(item):
            pending.extend(reversed(list(item)))
        else:
            flat.append(item)
    return flat


def normalize_child(item: Any) -> Node:
    if is_node(item):
        return item
    return TextNode(to_text(item))


def h(tag: Union[str, Component, Target], props: Optional[Props] = None, *children: Any) -> Node:
    """Build a node from a tag or component, props, and children.

    Element children are normalized to nodes. Component children are passed
    through raw (flattened, but not wrapped in text nodes) under the
    ``children`` key of the props handed to the component.
    """
    target = as_target(tag)
    props = props or {}
    flat = flatten_children(children)

    if target.kind == "component":
        return target.fn({**props, "children": flat})

    return ElementNode(
        tag=target.name,
        props=props,
        children=tuple(normalize_child(child) for child in flat),
    )


def Fragment(props: Props) -> FragmentNode:
    """Group children without emitting markup of their own."""
    children = flatten_children(props.get("children") or ())
    return FragmentNode(tuple(normalize_child(child) for child in children))


__all__ = [
    "ByComponent",
    "ByTag",
    "Component",
    "Fragment",
    "Props",
    "Target",
    "as_target",
    "flatten_children",
    "h",
    "is_child_sequence",
    "normalize_child",
    "to_text",
]
