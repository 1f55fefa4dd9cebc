"""
Base Schemas.

Helpers shared by the response models. Models are built from the mappings
produced by ebisearch.client.deserializer through a ``from_xml``
classmethod; ``parse`` wraps it so that a missing or mistyped element
surfaces as ResponseFormatError rather than a pydantic ValidationError.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ebisearch.client.deserializer import CONTENT_KEY
from ebisearch.core.exceptions import ResponseFormatError

ModelT = TypeVar("ModelT", bound="XmlModel")


def require_mapping(node: Any, tag: str) -> dict[str, Any]:
    """Return ``node`` if it is a mapping, else raise ResponseFormatError."""
    if not isinstance(node, dict):
        raise ResponseFormatError(f"Expected <{tag}> element, got {node!r}")
    return node


def unwrap(container: Any, tag: str) -> list[Any]:
    """
    Return the ``tag`` children of a wrapper element as a list.

    ``<fields><field/>...</fields>`` deserializes to ``{"field": [...]}``;
    this returns the inner list. An absent or empty wrapper yields []. A
    single child that was not forced into a list is wrapped in one.
    """
    if container is None:
        return []
    if not isinstance(container, dict):
        raise ResponseFormatError(f"Expected <{tag}> children, got {container!r}")
    children = container.get(tag)
    if children is None:
        return []
    if isinstance(children, list):
        return children
    return [children]


def text_of(node: Any) -> str:
    """Text content of an element with or without attributes."""
    if node is None:
        return ""
    if isinstance(node, dict):
        return node.get(CONTENT_KEY) or ""
    return str(node)


class XmlModel(BaseModel):
    """Base for models built from deserialized XML."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_xml(cls: type[ModelT], node: Any) -> ModelT:
        raise NotImplementedError

    @classmethod
    def parse(cls: type[ModelT], node: Any) -> ModelT:
        """
        Build the model from a deserialized mapping.

        Raises:
            ResponseFormatError: If required elements are missing
        """
        try:
            return cls.from_xml(node)
        except ValidationError as e:
            raise ResponseFormatError(
                f"Unexpected {cls.__name__} structure: {e}"
            ) from e
