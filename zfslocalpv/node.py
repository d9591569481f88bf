"""Builder and wrapper for ZFSNode objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .base import ResourceBuilder, ResourceWrapper
from .meta import OwnerReference
from .v1 import Pool, ZFSNode


@dataclass
class NodeResource(ResourceWrapper):
    """Wraps a ZFSNode, or None, for predicate checks."""

    obj: ZFSNode | None = None


class NodeBuilder(ResourceBuilder):
    """Builds a ZFSNode step by step."""

    object_type = ZFSNode
    object_name = "zfs node"
    nil_message = "failed to build zfs node object: nil node"

    def with_pools(self, pools: Iterable[Pool]) -> NodeBuilder:
        """Replace the node's pools."""
        self._object.pools = list(pools)
        return self

    def with_owner_references(self, *args: OwnerReference) -> NodeBuilder:
        """Replace the node's owner references."""
        self._object.metadata.owner_references = list(args)
        return self