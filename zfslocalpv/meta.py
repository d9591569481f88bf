"""Object metadata, group/version identifiers and a registry of known kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def with_resource(self, resource: str) -> GroupVersionResource:
        """Qualify an unqualified resource name with this group and version."""
        return GroupVersionResource(self.group, self.version, resource)

    def __str__(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource qualified by group and version."""

    group: str
    version: str
    resource: str

    def group_resource(self) -> GroupResource:
        """Drop the version, keeping group and resource."""
        return GroupResource(self.group, self.resource)


@dataclass(frozen=True)
class GroupResource:
    """A resource qualified by its group only."""

    group: str
    resource: str

    def __str__(self) -> str:
        return f"{self.resource}.{self.group}" if self.group else self.resource


@dataclass
class TypeMeta:
    """Kind and API version carried inline by every object."""

    kind: str = ""
    api_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.kind:
            out["kind"] = self.kind
        if self.api_version:
            out["apiVersion"] = self.api_version
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TypeMeta:
        return cls(kind=data.get("kind", ""), api_version=data.get("apiVersion", ""))


@dataclass
class OwnerReference:
    """A reference to the object that owns another one."""

    api_version: str = ""
    kind: str = ""
    name: str = ""
    uid: str = ""
    controller: bool | None = None
    block_owner_deletion: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "name": self.name,
            "uid": self.uid,
        }
        if self.controller is not None:
            out["controller"] = self.controller
        if self.block_owner_deletion is not None:
            out["blockOwnerDeletion"] = self.block_owner_deletion
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OwnerReference:
        return cls(
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
            name=data.get("name", ""),
            uid=data.get("uid", ""),
            controller=data.get("controller"),
            block_owner_deletion=data.get("blockOwnerDeletion"),
        )


@dataclass
class ObjectMeta:
    """Standard metadata of a stored object."""

    name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    creation_timestamp: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    owner_references: list[OwnerReference] = field(default_factory=list)
    finalizers: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire form, leaving out empty fields."""
        candidates: dict[str, Any] = {
            "name": self.name,
            "namespace": self.namespace,
            "uid": self.uid,
            "resourceVersion": self.resource_version,
            "creationTimestamp": self.creation_timestamp,
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
            "ownerReferences": [ref.to_dict() for ref in self.owner_references],
            "finalizers": list(self.finalizers),
        }
        return {key: value for key, value in candidates.items() if value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ObjectMeta:
        """Build metadata from its wire form; missing keys take defaults."""
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            uid=data.get("uid", ""),
            resource_version=data.get("resourceVersion", ""),
            creation_timestamp=data.get("creationTimestamp") or "",
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
            owner_references=[
                OwnerReference.from_dict(ref) for ref in data.get("ownerReferences") or []
            ],
            finalizers=list(data.get("finalizers") or []),
        )


@dataclass
class ListMeta:
    """Metadata of a list of objects."""

    resource_version: str = ""
    continue_token: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.resource_version:
            out["resourceVersion"] = self.resource_version
        if self.continue_token:
            out["continue"] = self.continue_token
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListMeta:
        return cls(
            resource_version=data.get("resourceVersion", ""),
            continue_token=data.get("continue", ""),
        )


class Scheme:
    """Registry of the object kinds known under each group version."""

    def __init__(self) -> None:
        self._types: dict[GroupVersion, dict[str, type]] = {}

    def add_known_types(self, group_version: GroupVersion, *args: type) -> None:
        """Register classes under a group version, keyed by class name."""
        kinds = self._types.setdefault(group_version, {})
        for kind_type in args:
            if not isinstance(kind_type, type):
                raise TypeError(f"expected a class, got {kind_type!r}")
            kind = kind_type.__name__
            existing = kinds.get(kind)
            if existing is not None and existing is not kind_type:
                raise ValueError(
                    f"double registration of different types for {group_version}, kind {kind}"
                )
            kinds[kind] = kind_type

    def known_types(self, group_version: GroupVersion) -> dict[str, type]:
        """Return a copy of the kinds registered under a group version."""
        return dict(self._types.get(group_version, {}))

    def recognizes(self, group_version: GroupVersion, kind: str) -> bool:
        """Tell whether a kind is registered under a group version."""
        return kind in self._types.get(group_version, {})