"""
Navigation

Builds item paths handed to the navigation callback when an artifact is
selected.
"""

import re

from .constants import ITEM_ROUTE

_DUPLICATE_SLASHES = re.compile(r"/+")


def build_item_path(base_path: str, entity_id: str) -> str:
    """
    Path of an item page: base_path + "/item/" + entity_id.

    Runs of slashes collapse to one, so "/Archive/" and "/Archive" give
    the same result.

    Example:
        build_item_path("/Archive/", "coin-01") -> "/Archive/item/coin-01"
    """
    return _DUPLICATE_SLASHES.sub("/", f"{base_path}/{ITEM_ROUTE}/{entity_id}")
