"""Stable JSON encoding of node payloads and stderr warnings."""

from __future__ import annotations

import json
import sys
from typing import Any

from .builder import to_text
from .models import node_from_payload, node_to_payload
from .nodes import Node


def stable_json_dumps(obj: object) -> str:
    """Sorted-key, indented JSON with a trailing newline; unknown values become text."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2, default=to_text) + "\n"


def dumps_node(node: Node) -> str:
    return stable_json_dumps(node_to_payload(node))


def loads_node(text: str) -> Node:
    payload: Any = json.loads(text)
    return node_from_payload(payload)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
