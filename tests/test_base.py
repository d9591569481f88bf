import pytest

from zfslocalpv.base import (
    BuildError,
    ListBuilder,
    ResourceBuilder,
    ResourceWrapper,
    has_label,
    has_labels,
    is_nil,
)
from zfslocalpv.meta import ObjectMeta
from zfslocalpv.v1 import ZFSVolume, ZFSVolumeList


class _Builder(ResourceBuilder):
    object_type = ZFSVolume
    object_name = "zfs volume"
    nil_message = "failed to build volume object: nil volume"


class _ListBuilder(ListBuilder):
    list_type = ZFSVolumeList


def _vol(name, labels=None):
    return ZFSVolume(metadata=ObjectMeta(name=name, labels=dict(labels or {})))


def test_wrapper_has_label():
    w = ResourceWrapper(_vol("a", {"k": "v"}))
    assert w.has_label("k", "v")
    assert not w.has_label("k", "x")
    assert not w.has_label("other", "v")


def test_wrapper_nil():
    assert ResourceWrapper(None).is_nil()
    assert not ResourceWrapper(_vol("a")).is_nil()
    assert is_nil()(ResourceWrapper(None))
    assert not ResourceWrapper(None).has_label("k", "v")


def test_has_labels_requires_all():
    w = ResourceWrapper(_vol("a", {"k": "v", "x": "y"}))
    assert has_labels({"k": "v", "x": "y"})(w)
    assert not has_labels({"k": "v", "x": "z"})(w)
    assert has_labels({})(w)


def test_builder_sets_name_and_namespace():
    vol = _Builder.build_from(ZFSVolume()).with_name("pvc-1").with_namespace("openebs").build()
    assert vol.metadata.name == "pvc-1"
    assert vol.metadata.namespace == "openebs"


def test_builder_collects_errors():
    with pytest.raises(BuildError) as info:
        _Builder.build_from(ZFSVolume()).with_name("").with_namespace("").build()
    assert info.value.errors == [
        "failed to build zfs volume object: missing name",
        "failed to build zfs volume object: missing namespace",
    ]


def test_build_from_none_fails():
    with pytest.raises(BuildError) as info:
        _Builder.build_from(None).with_name("a").build()
    assert info.value.errors == ["failed to build volume object: nil volume"]
    assert _Builder.build_from(ZFSVolume()).with_name("a").build().metadata.name == "a"


def test_build_from_keeps_same_object():
    original = _vol("a")
    assert _Builder.build_from(original).build() is original


def test_labels_merge_and_finalizers_append():
    original = _vol("a", {"k": "v"})
    original.metadata.finalizers.append("f1")
    vol = (
        _Builder.build_from(original)
        .with_labels({"x": "y", "k": "w"})
        .with_labels({})
        .with_finalizer(["f2"])
        .build()
    )
    assert vol.metadata.labels == {"k": "w", "x": "y"}
    assert vol.metadata.finalizers == ["f1", "f2"]


def test_list_without_filters_returns_all():
    vols = [_vol("a"), _vol("b")]
    result = _ListBuilder.from_list(ZFSVolumeList(items=vols)).list()
    assert isinstance(result, ZFSVolumeList)
    assert result.items == vols


def test_list_filters_preserve_order():
    vols = [_vol("a", {"k": "v"}), _vol("b"), _vol("c", {"k": "v"})]
    result = _ListBuilder.from_list(vols).with_filter(has_label("k", "v")).list()
    assert [v.metadata.name for v in result] == ["a", "c"]


def test_plain_list_builder_returns_list():
    vols = [_vol("a", {"k": "v"}), _vol("b", {"k": "w"})]
    result = ListBuilder.from_list(vols).with_filter(has_label("k", "w")).list()
    assert result == [vols[1]]


def test_empty_list_builder():
    result = _ListBuilder.from_list(ZFSVolumeList()).list()
    assert len(result) == 0
    assert result.items == []