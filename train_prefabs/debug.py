"""Debug dump of a prefab tree to the log."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

log = logging.getLogger(__name__)


def print_prefab(
    tree: Mapping[str, Any],
    indent: int = 0,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> None:
    """Log one line per key, nesting two spaces per level.

    Lists are walked like mappings keyed 1..N. There is no cycle check; a
    tree that contains itself recurses until Python gives up.
    """
    out = logger or log
    pad = "  " * indent
    for key, value in _items(tree):
        line = f"{pad}{key}: "
        if isinstance(value, (Mapping, list)):
            out.log(level, line)
            print_prefab(value, indent + 1, logger=out, level=level)
        else:
            out.log(level, line + str(value))


def _items(node):
    if isinstance(node, list):
        return enumerate(node, start=1)
    return node.items()
