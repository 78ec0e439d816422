"""Product domain entity."""

from typing import Any

# Products are opaque JSON objects; only "id" is interpreted.
Product = dict[str, Any]


def has_valid_id(item: Any) -> bool:
    """Check that an item is an object with a non-empty string id."""
    if not isinstance(item, dict):
        return False
    product_id = item.get("id")
    return isinstance(product_id, str) and product_id != ""
