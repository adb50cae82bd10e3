"""
Tree index service for FlowTree.

Read-only lookup over the supplied tree. Nodes live in an arena keyed by
id, and parent/children are id references, so lookups are O(1) and path
resolution walks parent links instead of re-searching the whole tree.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..domain.models import FlowNode

logger = logging.getLogger(__name__)


class TreeIndex:
    """
    Immutable id-indexed view of one hierarchy.

    Usage:
        index = build_index(data)
        node = index.find_by_id("n4")
        path = index.path_from_root("n4")   # [root, ..., node]
    """

    def __init__(self, nodes: Dict[str, FlowNode], root_id: str):
        """
        Initialize the index.

        Args:
            nodes: Arena of nodes keyed by id (insertion order = pre-order)
            root_id: Id of the root node; must be present in ``nodes``
        """
        if root_id not in nodes:
            raise KeyError(f"Root id {root_id!r} not in node arena")
        self._nodes = dict(nodes)
        self._root_id = root_id

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def root(self) -> FlowNode:
        return self._nodes[self._root_id]

    @property
    def root_id(self) -> str:
        return self._root_id

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[FlowNode]:
        """Iterate nodes in depth-first pre-order."""
        return iter(self._nodes.values())

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def find_by_id(self, node_id: Optional[str]) -> Optional[FlowNode]:
        """Return the node with this id, or None."""
        if node_id is None:
            return None
        node = self._nodes.get(node_id)
        if node is None:
            logger.debug(f"find_by_id: no node {node_id!r}")
        return node

    def path_from_root(self, node_id: Optional[str]) -> List[FlowNode]:
        """
        Return the nodes from the root down to ``node_id`` inclusive.

        Returns:
            Ordered list starting at the root, or [] if the id is unknown
        """
        node = self.find_by_id(node_id)
        if node is None:
            return []

        path = [node]
        while node.parent_id is not None:
            node = self._nodes.get(node.parent_id)
            if node is None:
                # Dangling back-reference; treat the chain as unresolvable
                logger.warning(f"path_from_root: broken parent chain under {node_id!r}")
                return []
            path.append(node)
        path.reverse()
        return path

    def parent_of(self, node_id: Optional[str]) -> Optional[FlowNode]:
        """Return the parent via the resolved path (path[-2]), or None at the root."""
        path = self.path_from_root(node_id)
        if len(path) < 2:
            return None
        return path[-2]

    def children_of(self, node_id: Optional[str]) -> List[FlowNode]:
        """Return the ordered children of a node ([] if unknown or a leaf)."""
        node = self.find_by_id(node_id)
        if node is None:
            return []
        return [self._nodes[cid] for cid in node.child_ids if cid in self._nodes]

    def siblings_of(self, node_id: Optional[str]) -> List[FlowNode]:
        """Return the node's layer (parent's children, itself included)."""
        parent = self.parent_of(node_id)
        if parent is None:
            return []
        return self.children_of(parent.id)
