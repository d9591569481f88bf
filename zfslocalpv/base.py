"""Shared wrappers, builders, list filters and predicates for resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Mapping

Predicate = Callable[["ResourceWrapper"], bool]


class BuildError(ValueError):
    """Raised when a builder collected one or more errors."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__("[" + " ".join(self.errors) + "]")


@dataclass
class ResourceWrapper:
    """Wraps an API object, or None, for predicate checks."""

    obj: Any = None

    def has_label(self, key: str, value: str) -> bool:
        """Tell whether the object carries the label key with this value."""
        if self.obj is None:
            return False
        labels = self.obj.metadata.labels or {}
        return key in labels and labels[key] == value

    def is_nil(self) -> bool:
        """Tell whether no object is wrapped."""
        return self.obj is None


def has_label(key: str, value: str) -> Predicate:
    """Predicate matching objects that carry one label."""
    return lambda wrapper: wrapper.has_label(key, value)


def has_labels(pairs: Mapping[str, str]) -> Predicate:
    """Predicate matching objects that carry all of the given labels."""
    wanted = dict(pairs)
    return lambda wrapper: all(wrapper.has_label(k, v) for k, v in wanted.items())


def is_nil() -> Predicate:
    """Predicate matching wrappers that hold no object."""
    return lambda wrapper: wrapper.is_nil()


class ResourceBuilder:
    """Builds an API object step by step, collecting errors until build()."""

    object_type: ClassVar[type]
    object_name: ClassVar[str] = "resource"
    nil_message: ClassVar[str] = "failed to build resource object: nil resource"

    def __init__(self, obj: Any = None) -> None:
        self._object = obj if obj is not None else self.object_type()
        self._errors: list[str] = []

    def _fail(self, message: str) -> ResourceBuilder:
        self._errors.append(message)
        return self

    def _missing(self, what: str) -> ResourceBuilder:
        return self._fail(f"failed to build {self.object_name} object: missing {what}")

    @classmethod
    def build_from(cls, obj: Any) -> ResourceBuilder:
        """Start from an existing object; None records an error."""
        if obj is None:
            builder = cls()
            builder._fail(cls.nil_message)
            return builder
        return cls(obj)

    def with_namespace(self, namespace: str) -> ResourceBuilder:
        if not namespace:
            return self._missing("namespace")
        self._object.metadata.namespace = namespace
        return self

    def with_name(self, name: str) -> ResourceBuilder:
        if not name:
            return self._missing("name")
        self._object.metadata.name = name
        return self

    def with_labels(self, labels: Mapping[str, str] | None) -> ResourceBuilder:
        """Merge labels into those already present."""
        if not labels:
            return self
        self._object.metadata.labels.update(labels)
        return self

    def with_finalizer(self, finalizers: Iterable[str]) -> ResourceBuilder:
        """Append finalizers to those already present."""
        self._object.metadata.finalizers.extend(finalizers)
        return self

    def build(self) -> Any:
        """Return the object, or raise BuildError if any step failed."""
        if self._errors:
            raise BuildError(self._errors)
        return self._object


class ListBuilder:
    """Collects API objects and filters them with predicates."""

    wrapper_type: ClassVar[type[ResourceWrapper]] = ResourceWrapper
    list_type: ClassVar[type | None] = None

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._filters: list[Predicate] = []

    @classmethod
    def from_list(cls, items: Iterable[Any]) -> ListBuilder:
        """Start from an API list or any iterable of objects."""
        builder = cls()
        builder._items.extend(items)
        return builder

    def with_filter(self, *args: Predicate) -> ListBuilder:
        self._filters.extend(args)
        return self

    def list(self) -> Any:
        """Return the objects that pass every filter, in their original order."""
        items = [
            item
            for item in self._items
            if all(pred(self.wrapper_type(item)) for pred in self._filters)
        ]
        if self.list_type is None:
            return items
        return self.list_type(items=items)