"""Path tree builder.

Turns the flat ``paths`` mapping of a Swagger document into a nested tree
keyed by path segment, e.g. ``/users/{id}`` and ``/users/profile`` end up
as two leaves under a shared ``users`` node.
"""

from typing import Any

from .base import LeafDescriptor, TreeNode, as_text
from .params import normalize_params


def split_path(path: str) -> list[str]:
    """Split a URL path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def transform_document(doc: dict) -> dict[str, TreeNode]:
    """Build the endpoint tree for a whole Swagger document."""
    return build_tree(doc.get("paths") or {})


def build_tree(paths: dict[str, dict]) -> dict[str, TreeNode]:
    """Build a nested endpoint tree from a ``path -> {method: operation}`` mapping.

    Intermediate nodes are created once and shared by every path with the same
    prefix. The final segment of a path is always overwritten by a new leaf,
    so when a path string repeats the last occurrence wins. Only the first
    method listed under a path is used.
    """
    root: dict[str, TreeNode] = {}
    for path, operations in paths.items():
        segments = split_path(path)
        if not segments:
            continue

        node = root
        for segment in segments[:-1]:
            node = _get_or_create(node, segment)
        if not isinstance(operations, dict):
            operations = {}
        node[segments[-1]] = _build_leaf(path, operations)
    return root


def _get_or_create(node: dict[str, TreeNode], segment: str) -> dict[str, TreeNode]:
    child = node.get(segment)
    if child is None:
        child = node[segment] = {}
    # A longer path extending a complete endpoint hangs below that leaf
    if isinstance(child, LeafDescriptor):
        return child.children
    return child


def _build_leaf(path: str, operations: dict[str, Any]) -> LeafDescriptor:
    method, operation = next(iter(operations.items()), (None, {}))
    if not isinstance(operation, dict):
        operation = {}

    return LeafDescriptor(
        description=as_text(operation.get("summary"), ""),
        url=path,
        method=as_text(method),
        **normalize_params(operation.get("parameters")),
    )


def tree_to_dict(node: TreeNode) -> dict[str, Any]:
    """Serialize a tree into plain, JSON-ready dicts.

    Unset leaf fields (a missing method, parameter description or
    ``required`` flag) are left out of the output.
    """
    if isinstance(node, LeafDescriptor):
        result = node.model_dump(exclude_none=True)
        result.update({key: tree_to_dict(child) for key, child in node.children.items()})
        return result
    return {key: tree_to_dict(child) for key, child in node.items()}
