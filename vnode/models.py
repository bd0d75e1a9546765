"""Pydantic models for the plain-data form of node trees."""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .nodes import ElementNode, FragmentNode, Node, TextNode


class TextPayload(BaseModel):
    """Literal character data."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Unescaped text content.")

    model_config = ConfigDict(extra="forbid")


class FragmentPayload(BaseModel):
    """Grouping of children with no markup of its own."""

    type: Literal["fragment"] = "fragment"
    children: List["NodePayload"] = Field(
        default_factory=list, description="Child nodes in render order."
    )

    model_config = ConfigDict(extra="forbid")


class ElementPayload(BaseModel):
    """Tagged element with attributes and nested content."""

    type: Literal["element"] = "element"
    tag: str = Field(..., description="Tag name, emitted as-is.")
    props: Dict[str, Any] = Field(
        default_factory=dict,
        description="Attribute values; stringified when rendered.",
    )
    children: List["NodePayload"] = Field(
        default_factory=list, description="Child nodes in render order."
    )

    model_config = ConfigDict(extra="forbid")


NodePayload = Annotated[
    Union[TextPayload, FragmentPayload, ElementPayload],
    Field(discriminator="type"),
]

FragmentPayload.model_rebuild()
ElementPayload.model_rebuild()

_payload_adapter: TypeAdapter = TypeAdapter(NodePayload)


def _to_model(node: Node) -> Union[TextPayload, FragmentPayload, ElementPayload]:
    if isinstance(node, TextNode):
        return TextPayload(text=node.text)
    if isinstance(node, FragmentNode):
        return FragmentPayload(children=[_to_model(child) for child in node.children])
    return ElementPayload(
        tag=node.tag,
        props=dict(node.props),
        children=[_to_model(child) for child in node.children],
    )


def _from_model(model: Union[TextPayload, FragmentPayload, ElementPayload]) -> Node:
    if isinstance(model, TextPayload):
        return TextNode(model.text)
    if isinstance(model, FragmentPayload):
        return FragmentNode(tuple(_from_model(child) for child in model.children))
    return ElementNode(
        tag=model.tag,
        props=model.props,
        children=tuple(_from_model(child) for child in model.children),
    )


def node_to_payload(node: Node) -> Dict[str, Any]:
    """Return the plain dict form of a node tree."""
    return _to_model(node).model_dump()


def node_from_payload(data: Any) -> Node:
    """Validate a plain dict payload and build the node tree it describes.

    Raises ``pydantic.ValidationError`` when the payload is malformed.
    """
    return _from_model(_payload_adapter.validate_python(data))


__all__ = [
    "ElementPayload",
    "FragmentPayload",
    "NodePayload",
    "TextPayload",
    "node_from_payload",
    "node_to_payload",
]
