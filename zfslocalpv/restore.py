"""Builder, wrapper and list filter for ZFSRestore objects."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .base import ListBuilder, ResourceBuilder, ResourceWrapper
from .v1 import VolumeInfo, ZFSRestore, ZFSRestoreList, ZFSRestoreStatus


@dataclass
class RestoreResource(ResourceWrapper):
    """Wraps a ZFSRestore, or None, for predicate checks."""

    obj: ZFSRestore | None = None


class RestoreBuilder(ResourceBuilder):
    """Builds a ZFSRestore step by step."""

    object_type = ZFSRestore
    object_name = "csi rstr"
    nil_message = "failed to build rstr object: nil rstr"

    def with_volume(self, name: str) -> RestoreBuilder:
        """Set the target volume; an empty value records an error."""
        if not name:
            return self._missing("volume name")
        self._object.spec.volume_name = name
        return self

    def with_vol_spec(self, spec: VolumeInfo) -> RestoreBuilder:
        """Copy a volume spec into the restore."""
        self._object.vol_spec = dataclasses.replace(spec)
        return self

    def with_node(self, node: str) -> RestoreBuilder:
        """Set the owner node; an empty value records an error."""
        if not node:
            return self._missing("node name")
        self._object.spec.owner_node_id = node
        return self

    def with_status(self, status: ZFSRestoreStatus | str | None) -> RestoreBuilder:
        """Set the restore status; an empty value clears it.

        A string that names no known status raises ValueError.
        """
        self._object.status = ZFSRestoreStatus(status) if status else None
        return self

    def with_remote(self, server: str) -> RestoreBuilder:
        """Set the restore source; an empty value records an error."""
        if not server:
            return self._missing("node name")
        self._object.spec.restore_src = server
        return self


class RestoreListBuilder(ListBuilder):
    """Collects ZFSRestore objects and filters them into a ZFSRestoreList."""

    wrapper_type = RestoreResource
    list_type = ZFSRestoreList