"""Resource kinds of the zfs.openebs.io/v1 API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from .meta import GroupResource, GroupVersion, ListMeta, ObjectMeta, Scheme, TypeMeta

SCHEME_GROUP_VERSION = GroupVersion(group="zfs.openebs.io", version="v1")


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
    ("shared", "shared", False),
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
    shared: str = ""

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


@dataclass
class ZFSBackupSpec:
    """What a backup covers and where it goes."""

    volume_name: str = ""
    owner_node_id: str = ""
    snap_name: str = ""
    prev_snap_name: str = ""
    backup_dest: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "volumeName": self.volume_name,
            "ownerNodeID": self.owner_node_id,
        }
        if self.snap_name:
            out["snapName"] = self.snap_name
        if self.prev_snap_name:
            out["prevSnapName"] = self.prev_snap_name
        out["backupDest"] = self.backup_dest
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSBackupSpec:
        return cls(
            volume_name=data.get("volumeName", ""),
            owner_node_id=data.get("ownerNodeID", ""),
            snap_name=data.get("snapName", ""),
            prev_snap_name=data.get("prevSnapName", ""),
            backup_dest=data.get("backupDest", ""),
        )


class ZFSBackupStatus(str, Enum):
    """Progress of a backup."""

    DONE = "Done"
    FAILED = "Failed"
    INIT = "Init"
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    INVALID = "Invalid"


@dataclass
class ZFSBackup:
    """A ZFS backup resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ZFSBackupSpec = field(default_factory=ZFSBackupSpec)
    status: ZFSBackupStatus | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": self.status.value if self.status is not None else "",
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSBackup:
        """Build a backup from its wire form; an unknown status raises ValueError."""
        raw_status = data.get("status") or ""
        return cls(
            type_meta=TypeMeta.from_dict(data),
            metadata=ObjectMeta.from_dict(data.get("metadata") or {}),
            spec=ZFSBackupSpec.from_dict(data.get("spec") or {}),
            status=ZFSBackupStatus(raw_status) if raw_status else None,
        )


@dataclass
class ZFSBackupList:
    """A list of ZFSBackup resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[ZFSBackup] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ZFSBackup]:
        return iter(self.items)


@dataclass
class ZFSRestoreSpec:
    """Target volume and source of a restore."""

    volume_name: str = ""
    owner_node_id: str = ""
    restore_src: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "volumeName": self.volume_name,
            "ownerNodeID": self.owner_node_id,
            "restoreSrc": self.restore_src,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSRestoreSpec:
        return cls(
            volume_name=data.get("volumeName", ""),
            owner_node_id=data.get("ownerNodeID", ""),
            restore_src=data.get("restoreSrc", ""),
        )


class ZFSRestoreStatus(str, Enum):
    """Progress of a restore."""

    DONE = "Done"
    FAILED = "Failed"
    INIT = "Init"
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    INVALID = "Invalid"


@dataclass
class ZFSRestore:
    """A ZFS restore resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ZFSRestoreSpec = field(default_factory=ZFSRestoreSpec)
    vol_spec: VolumeInfo = field(default_factory=VolumeInfo)
    status: ZFSRestoreStatus | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "volSpec": self.vol_spec.to_dict(),
            "status": self.status.value if self.status is not None else "",
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSRestore:
        """Build a restore from its wire form; an unknown status raises ValueError."""
        raw_status = data.get("status") or ""
        return cls(
            type_meta=TypeMeta.from_dict(data),
            metadata=ObjectMeta.from_dict(data.get("metadata") or {}),
            spec=ZFSRestoreSpec.from_dict(data.get("spec") or {}),
            vol_spec=VolumeInfo.from_dict(data.get("volSpec") or {}),
            status=ZFSRestoreStatus(raw_status) if raw_status else None,
        )


@dataclass
class ZFSRestoreList:
    """A list of ZFSRestore resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[ZFSRestore] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ZFSRestore]:
        return iter(self.items)


@dataclass
class Pool:
    """A zfs pool on a node; free and used are capacity quantities."""

    name: str = ""
    uuid: str = ""
    free: str = "0"
    used: str = "0"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "uuid": self.uuid, "free": self.free, "used": self.used}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pool:
        return cls(
            name=data.get("name", ""),
            uuid=data.get("uuid", ""),
            free=str(data.get("free", "0")),
            used=str(data.get("used", "0")),
        )


@dataclass
class ZFSNode:
    """The zfs pools available on one node."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    pools: list[Pool] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "pools": [pool.to_dict() for pool in self.pools],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZFSNode:
        return cls(
            type_meta=TypeMeta.from_dict(data),
            metadata=ObjectMeta.from_dict(data.get("metadata") or {}),
            pools=[Pool.from_dict(pool) for pool in data.get("pools") or []],
        )


@dataclass
class ZFSNodeList:
    """A list of ZFSNode resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[ZFSNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ZFSNode]:
        return iter(self.items)


def add_to_scheme(scheme: Scheme) -> None:
    """Register every kind of this API version with a scheme."""
    scheme.add_known_types(
        SCHEME_GROUP_VERSION,
        ZFSVolume,
        ZFSVolumeList,
        ZFSSnapshot,
        ZFSSnapshotList,
        ZFSBackup,
        ZFSBackupList,
        ZFSRestore,
        ZFSRestoreList,
        ZFSNode,
        ZFSNodeList,
    )