"""Builder, wrapper and list filter for ZFSSnapshot objects."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ListBuilder, ResourceBuilder, ResourceWrapper
from .v1 import ZFSSnapshot, ZFSSnapshotList


@dataclass
class SnapshotResource(ResourceWrapper):
    """Wraps a ZFSSnapshot, or None, for predicate checks."""

    obj: ZFSSnapshot | None = None


class SnapshotBuilder(ResourceBuilder):
    """Builds a ZFSSnapshot step by step."""

    object_type = ZFSSnapshot
    object_name = "csi snap"
    nil_message = "failed to build snap object: nil snap"


class SnapshotListBuilder(ListBuilder):
    """Collects ZFSSnapshot objects and filters them into a ZFSSnapshotList."""

    wrapper_type = SnapshotResource
    list_type = ZFSSnapshotList