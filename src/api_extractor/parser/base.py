"""Data models for the extracted API tree.

The tree is made of two node kinds: intermediate nodes (plain dicts keyed
by path segment) and LeafDescriptor records for complete endpoints.
"""

from typing import Any, Union

from pydantic import BaseModel, Field


class FieldSpec(BaseModel):
    """A normalized request parameter."""

    type: str = "string"
    description: str | None = None
    required: bool | None = None  # True or unset, never False


class LeafDescriptor(BaseModel):
    """A complete endpoint at the end of a path."""

    description: str = ""
    url: str  # original, unsplit path string
    method: str | None = None
    params: dict[str, FieldSpec] | None = None  # query parameters
    data: dict[str, FieldSpec] | None = None  # body / formData parameters
    error: dict | None = None  # {} when no usable parameters
    children: dict[str, Any] = Field(default_factory=dict, exclude=True)


TreeNode = Union[dict[str, Any], LeafDescriptor]


def as_text(value: Any, default: str | None = None) -> str | None:
    """Coerce a loosely typed scalar (e.g. unquoted YAML ``404`` or ``yes``) to text.

    Booleans keep their JSON spelling. Missing values and nested structures
    fall back to ``default``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return default
