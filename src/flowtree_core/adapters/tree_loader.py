"""
Tree loader adapter.

Turns nested mappings (as produced by JSON) into a TreeIndex arena.

Expected shape for each node:
    {"id": "n1", "label": "Root", "color": "#2563eb",
     "zIndex": 100, "level": 0, "children": [...]}

``level`` and ``parentId`` are optional; both are derived from nesting.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..domain.models import FlowNode
from ..services.tree_index import TreeIndex

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#2563eb"


class TreeFormatError(ValueError):
    """Raised when tree data cannot be turned into a hierarchy."""
    pass


def build_index(data: Mapping[str, Any]) -> TreeIndex:
    """
    Build a TreeIndex from a nested mapping.

    Args:
        data: Root node mapping with nested ``children`` lists

    Returns:
        TreeIndex with nodes in depth-first pre-order

    Raises:
        TreeFormatError: If a node is malformed or its level contradicts nesting
    """
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"Root must be a mapping, got {type(data).__name__}")

    nodes: Dict[str, FlowNode] = {}
    root_id = _required_str(data, "id", "root")

    # Iterative pre-order walk; each entry is (mapping, parent_id, depth, where)
    stack: List[Tuple[Mapping[str, Any], Optional[str], int, str]] = [
        (data, None, 0, "root")
    ]
    while stack:
        raw, parent_id, depth, where = stack.pop()
        node_id = _required_str(raw, "id", where)
        label = _required_str(raw, "label", where)

        level = raw.get("level", depth)
        if level != depth:
            raise TreeFormatError(
                f"{where}: level {level!r} does not match depth {depth} of node {node_id!r}"
            )

        children = raw.get("children") or []
        if not isinstance(children, list):
            raise TreeFormatError(f"{where}: 'children' must be a list")

        child_ids = []
        for i, child in enumerate(children):
            if not isinstance(child, Mapping):
                raise TreeFormatError(f"{where}.children[{i}]: node must be a mapping")
            child_ids.append(_required_str(child, "id", f"{where}.children[{i}]"))

        try:
            z_index = int(raw.get("zIndex", raw.get("z_index", 0)))
        except (TypeError, ValueError) as e:
            raise TreeFormatError(f"{where}: invalid zIndex ({e})") from e

        if node_id in nodes:
            # First occurrence in pre-order wins, like a depth-first search
            logger.warning(f"Duplicate node id {node_id!r} at {where}; keeping first")
        else:
            nodes[node_id] = FlowNode(
                id=node_id,
                label=label,
                level=depth,
                color=str(raw.get("color", DEFAULT_COLOR)),
                z_index=z_index,
                parent_id=parent_id,
                child_ids=tuple(child_ids),
            )

        # Push in reverse so children pop in order
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], node_id, depth + 1, f"{where}.children[{i}]"))

    logger.debug(f"Built tree index with {len(nodes)} nodes (root {root_id!r})")
    return TreeIndex(nodes, root_id)


def load_tree(path: Union[str, Path]) -> TreeIndex:
    """
    Read a JSON tree file and index it.

    Raises:
        TreeFormatError: If the file cannot be read, is not valid JSON,
            or is not a valid tree
    """
    path = Path(path)
    logger.info(f"Loading tree from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise TreeFormatError(f"{path}: not UTF-8 text ({e})") from e
    except OSError as e:
        raise TreeFormatError(f"{path}: cannot read file ({e})") from e
    return build_index(data)


def _required_str(raw: Mapping[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if value is None or value == "":
        raise TreeFormatError(f"{where}: missing required field '{key}'")
    return str(value)
