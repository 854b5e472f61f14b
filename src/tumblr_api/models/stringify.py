"""Re-encode entities as JSON for logging and debugging."""

import json
from dataclasses import fields, is_dataclass
from typing import Any


def to_wire(value: Any) -> Any:
    """Convert an entity into plain JSON-compatible data keyed by wire names.

    Media containers keep their original shape: a single media becomes an
    object, a collection becomes an array.
    """
    # Local import: the npf module depends on blog, which depends on us.
    from tumblr_api.models.npf import MediaCollection, SingleMedia

    if isinstance(value, SingleMedia):
        return to_wire(value.media)
    if isinstance(value, MediaCollection):
        return [to_wire(m) for m in value.media_collection]
    if is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in fields(value):
            if not f.metadata.get("wire", True):
                continue
            item = getattr(value, f.name)
            if f.metadata.get("omitempty") and not item:
                continue
            out[f.name] = to_wire(item)
        return out
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def to_json(entity: Any) -> str:
    """Return an entity as a JSON string.

    Not byte-for-byte the wire input: key order follows the dataclass and
    fields absent on the wire come back as their zero values.
    """
    return json.dumps(to_wire(entity), ensure_ascii=False)
