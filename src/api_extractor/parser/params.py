"""Parameter normalizer.

Groups the raw Swagger parameters of one operation under the request key
they belong to (``params`` for query strings, ``data`` for request bodies).
"""

from typing import Any

from .base import FieldSpec, as_text

# Checked in order: the first location used by any parameter picks the key.
PARAM_LOCATIONS = [
    ("query", "params"),
    ("body", "data"),
    ("formData", "data"),
]

TYPE_REVISIONS = {"integer": "number"}


def normalize_params(raw_params: Any) -> dict[str, dict]:
    """Normalize raw parameter descriptors into ``{key: {name: FieldSpec}}``.

    Returns ``{"error": {}}`` when no parameter lives in a recognized location.
    Entries that are not mappings, or have no usable name, are skipped.
    """
    if not isinstance(raw_params, list):
        raw_params = []
    raw_params = [p for p in raw_params if isinstance(p, dict)]

    key = _select_key(raw_params)
    if key is None:
        return {"error": {}}

    recognized = {location for location, _ in PARAM_LOCATIONS}
    fields: dict[str, FieldSpec] = {}
    for p in raw_params:
        name = as_text(p.get("name"))
        if name is None or as_text(p.get("in")) not in recognized:
            continue
        raw_type = as_text(p.get("type"))
        fields[name] = FieldSpec(
            type=TYPE_REVISIONS.get(raw_type) or raw_type or "string",
            description=as_text(p.get("description")),
            required=True if p.get("required") else None,
        )
    return {key: fields}


def _select_key(raw_params: list[dict]) -> str | None:
    used = {as_text(p.get("in")) for p in raw_params}
    for location, key in PARAM_LOCATIONS:
        if location in used:
            return key
    return None
