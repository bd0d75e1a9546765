"""Virtual node model for markup serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Literal, Mapping, Tuple


class FrozenProps(Mapping[str, Any]):
    """Read-only attribute mapping; hashable when its values are."""

    def __init__(self, items: Any = ()) -> None:
        self._data: Dict[str, Any] = dict(items)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenProps({self._data!r})"


@dataclass(frozen=True)
class TextNode:
    text: str
    type: Literal["text"] = field(default="text", init=False, repr=False)


@dataclass(frozen=True)
class FragmentNode:
    children: Tuple["Node", ...] = ()
    type: Literal["fragment"] = field(default="fragment", init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class ElementNode:
    tag: str
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()
    type: Literal["element"] = field(default="element", init=False, repr=False)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict cannot reach the node.
        object.__setattr__(self, "props", FrozenProps(self.props))
        object.__setattr__(self, "children", tuple(self.children))


Node = TextNode | FragmentNode | ElementNode

NODE_TYPES = (TextNode, FragmentNode, ElementNode)


def is_node(value: object) -> bool:
    return isinstance(value, NODE_TYPES)


__all__ = ["ElementNode", "FragmentNode", "FrozenProps", "NODE_TYPES", "Node", "TextNode", "is_node"]
