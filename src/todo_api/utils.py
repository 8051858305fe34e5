from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Union


# PUBLIC_INTERFACE
def collection_envelope(items: Union[Sequence[Any], Iterable[Any]]) -> Dict[str, Any]:
    """
    Build the standard success envelope for list endpoints.

    Args:
        items: The list/iterable of items to return.

    Returns:
        Dict with keys: success, data, count.
    """
    # Ensure items is materialized as a list (in case an iterator is passed)
    materialized: List[Any] = list(items) if not isinstance(items, list) else items
    return {
        "success": True,
        "data": materialized,
        "count": len(materialized),
    }


# PUBLIC_INTERFACE
def error_envelope(message: str) -> Dict[str, Any]:
    """Build the standard failure envelope."""
    return {"success": False, "error": message}
