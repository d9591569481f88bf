"""Builder, wrapper and list filter for ZFSBackup objects."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ListBuilder, ResourceBuilder, ResourceWrapper
from .v1 import ZFSBackup, ZFSBackupList, ZFSBackupStatus


@dataclass
class BackupResource(ResourceWrapper):
    """Wraps a ZFSBackup, or None, for predicate checks."""

    obj: ZFSBackup | None = None


class BackupBuilder(ResourceBuilder):
    """Builds a ZFSBackup step by step."""

    object_type = ZFSBackup
    object_name = "csi bkp"
    nil_message = "failed to build bkp object: nil bkp"

    def with_prev_snap(self, snap: str) -> BackupBuilder:
        """Set the snapshot of the last completed backup."""
        self._object.spec.prev_snap_name = snap
        return self

    def with_snap(self, snap: str) -> BackupBuilder:
        """Set the snapshot this backup is taken from."""
        self._object.spec.snap_name = snap
        return self

    def with_volume(self, volume: str) -> BackupBuilder:
        """Set the source volume; an empty value records an error."""
        if not volume:
            return self._missing("volume name")
        self._object.spec.volume_name = volume
        return self

    def with_node(self, node: str) -> BackupBuilder:
        """Set the owner node; an empty value records an error."""
        if not node:
            return self._fail("failed to build bkp object: missing node id")
        self._object.spec.owner_node_id = node
        return self

    def with_status(self, status: ZFSBackupStatus | str) -> BackupBuilder:
        """Set the backup status; an empty value records an error.

        A string that names no known status raises ValueError.
        """
        if not status:
            return self._fail("failed to build bkp object: missing snap name")
        self._object.status = ZFSBackupStatus(status)
        return self

    def with_remote(self, server: str) -> BackupBuilder:
        """Set the remote destination; an empty value records an error."""
        if not server:
            return self._fail("failed to build bkp object: missing remote")
        self._object.spec.backup_dest = server
        return self


class BackupListBuilder(ListBuilder):
    """Collects ZFSBackup objects and filters them into a ZFSBackupList."""

    wrapper_type = BackupResource
    list_type = ZFSBackupList