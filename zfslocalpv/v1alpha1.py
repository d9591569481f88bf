"""Resource kinds of the zfs.openebs.io/v1alpha1 API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .meta import GroupResource, GroupVersion, ListMeta, ObjectMeta, Scheme, TypeMeta

SCHEME_GROUP_VERSION = GroupVersion(group="zfs.openebs.io", version="v1alpha1")


def resource(resource: str) -> GroupResource:
    """Qualify an unqualified resource name with this API group."""
    return SCHEME_GROUP_VERSION.with_resource(resource).group_resource()


# (attribute, wire key, always emitted)
_VOLUME_INFO_FIELDS = (
    ("owner_node_id", "ownerNodeID", True),
    ("pool_name", "poolName", True),
    ("snap_name", "snapname", False),
    ("capacity", "capacity", True),
    ("record_size", "recordsize", False),
    ("vol_block_size", "volblocksize", False),
    ("compression", "compression", False),
    ("dedup", "dedup", False),
    ("encryption", "encryption", False),
    ("key_location", "keylocation", False),
    ("key_format", "keyformat", False),
    ("thin_provision", "thinProvision", False),
    ("volume_type", "volumeType", True),
    ("fs_type", "fsType", False),
)


@dataclass
class VolumeInfo:
    """Parameters of a ZFS volume, dataset or zvol."""

    owner_node_id: str = ""
    pool_name: str = ""
    snap_name: str = ""
    capacity: str = ""
    record_size: str = ""
    vol_block_size: str = ""
    compression: str = ""
    dedup: str = ""
    encryption: str = ""
    key_location: str = ""
    key_format: str = ""
    thin_provision: str = ""
    volume_type: str = ""
    fs_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for attr, key, required in _VOLUME_INFO_FIELDS:
            value = getattr(self, attr)
            if required or value:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VolumeInfo:
        return cls(**{attr: data.get(key, "") for attr, key, _ in _VOLUME_INFO_FIELDS})


def _state_dict(state: str) -> dict[str, Any]:
    return {"state": state} if state else {}


@dataclass
class VolStatus:
    """Current state of a volume provisioning request."""

    state: str = ""


@dataclass
class ZFSVolume:
    """A ZFS based volume."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: VolumeInfo = field(default_factory=VolumeInfo)
    status: VolStatus = field(default_factory=VolStatus)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": _state_dict(self.status.state),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSVolume:
        return cls(
            type_meta=TypeMeta.from_dict(data),
            metadata=ObjectMeta.from_dict(data.get("metadata") or {}),
            spec=VolumeInfo.from_dict(data.get("spec") or {}),
            status=VolStatus((data.get("status") or {}).get("state", "")),
        )


@dataclass
class ZFSVolumeList:
    """A list of ZFSVolume resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[ZFSVolume] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ZFSVolume]:
        return iter(self.items)


@dataclass
class SnapStatus:
    """Whether a snapshot was created successfully."""

    state: str = ""


@dataclass
class ZFSSnapshot:
    """A ZFS snapshot of a volume."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: VolumeInfo = field(default_factory=VolumeInfo)
    status: SnapStatus = field(default_factory=SnapStatus)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": _state_dict(self.status.state),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSSnapshot:
        return cls(
            type_meta=TypeMeta.from_dict(data),
            metadata=ObjectMeta.from_dict(data.get("metadata") or {}),
            spec=VolumeInfo.from_dict(data.get("spec") or {}),
            status=SnapStatus((data.get("status") or {}).get("state", "")),
        )


@dataclass
class ZFSSnapshotList:
    """A list of ZFSSnapshot resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[ZFSSnapshot] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ZFSSnapshot]:
        return iter(self.items)


def add_to_scheme(scheme: Scheme) -> None:
    """Register every kind of this API version with a scheme."""
    scheme.add_known_types(
        SCHEME_GROUP_VERSION,
        ZFSVolume,
        ZFSVolumeList,
        ZFSSnapshot,
        ZFSSnapshotList,
    )