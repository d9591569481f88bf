"""Builder, wrapper and list filter for ZFSVolume objects."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ListBuilder, ResourceBuilder, ResourceWrapper
from .v1 import ZFSVolume, ZFSVolumeList


@dataclass
class VolumeResource(ResourceWrapper):
    """Wraps a ZFSVolume, or None, for predicate checks."""

    obj: ZFSVolume | None = None


class VolumeBuilder(ResourceBuilder):
    """Builds a ZFSVolume step by step."""

    object_type = ZFSVolume
    object_name = "zfs volume"
    nil_message = "failed to build volume object: nil volume"

    def with_capacity(self, capacity: str) -> VolumeBuilder:
        """Set the capacity; an empty value records an error."""
        if not capacity:
            return self._missing("capacity")
        self._object.spec.capacity = capacity
        return self

    def with_encryption(self, encryption: str) -> VolumeBuilder:
        self._object.spec.encryption = encryption
        return self

    def with_key_location(self, location: str) -> VolumeBuilder:
        self._object.spec.key_location = location
        return self

    def with_key_format(self, key_format: str) -> VolumeBuilder:
        self._object.spec.key_format = key_format
        return self

    def with_compression(self, compression: str) -> VolumeBuilder:
        self._object.spec.compression = compression
        return self

    def with_dedup(self, dedup: str) -> VolumeBuilder:
        self._object.spec.dedup = dedup
        return self

    def with_thin_prov(self, thin_prov: str) -> VolumeBuilder:
        self._object.spec.thin_provision = thin_prov
        return self

    def with_owner_node_id(self, node_id: str) -> VolumeBuilder:
        """Set the owner node without checking it."""
        self._object.spec.owner_node_id = node_id
        return self

    def with_record_size(self, record_size: str) -> VolumeBuilder:
        self._object.spec.record_size = record_size
        return self

    def with_vol_block_size(self, block_size: str) -> VolumeBuilder:
        self._object.spec.vol_block_size = block_size
        return self

    def with_volume_type(self, volume_type: str) -> VolumeBuilder:
        self._object.spec.volume_type = volume_type
        return self

    def with_volume_status(self, status: str) -> VolumeBuilder:
        self._object.status.state = status
        return self

    def with_fs_type(self, fs_type: str) -> VolumeBuilder:
        self._object.spec.fs_type = fs_type
        return self

    def with_shared(self, shared: str) -> VolumeBuilder:
        self._object.spec.shared = shared
        return self

    def with_snapshot(self, snap: str) -> VolumeBuilder:
        """Set the snapshot a clone volume is created from."""
        self._object.spec.snap_name = snap
        return self

    def with_pool_name(self, pool: str) -> VolumeBuilder:
        """Set the pool; an empty value records an error."""
        if not pool:
            return self._missing("pool name")
        self._object.spec.pool_name = pool
        return self

    def with_node_name(self, name: str) -> VolumeBuilder:
        """Set the owner node; an empty value records an error."""
        if not name:
            return self._missing("node name")
        self._object.spec.owner_node_id = name
        return self


class VolumeListBuilder(ListBuilder):
    """Collects ZFSVolume objects and filters them into a ZFSVolumeList."""

    wrapper_type = VolumeResource
    list_type = ZFSVolumeList