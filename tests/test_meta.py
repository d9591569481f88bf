import pytest

from zfslocalpv.meta import (
    GroupResource,
    GroupVersion,
    GroupVersionResource,
    ListMeta,
    ObjectMeta,
    OwnerReference,
    Scheme,
    TypeMeta,
)


GV = GroupVersion("zfs.openebs.io", "v1")


def test_with_resource_and_group_resource():
    gvr = GV.with_resource("zfsvolumes")
    assert gvr == GroupVersionResource("zfs.openebs.io", "v1", "zfsvolumes")
    assert gvr.group_resource() == GroupResource("zfs.openebs.io", "zfsvolumes")


def test_group_version_str():
    assert str(GV) == "zfs.openebs.io/v1"
    assert str(GroupVersion("", "v1")) == "v1"


def test_empty_object_meta_serialises_empty():
    assert ObjectMeta().to_dict() == {}


def test_object_meta_round_trip():
    meta = ObjectMeta(
        name="pvc-1",
        namespace="openebs",
        labels={"app": "db"},
        finalizers=["zfs.openebs.io/finalizer"],
        owner_references=[
            OwnerReference(api_version="v1", kind="Node", name="node-1", uid="uid-1", controller=True)
        ],
    )
    data = meta.to_dict()
    assert data["name"] == "pvc-1"
    assert data["labels"] == {"app": "db"}
    assert "annotations" not in data
    assert ObjectMeta.from_dict(data) == meta


def test_object_meta_from_dict_missing_keys():
    meta = ObjectMeta.from_dict({"name": "x"})
    assert meta.name == "x"
    assert meta.labels == {}
    assert meta.finalizers == []


def test_owner_reference_omits_unset_flags():
    data = OwnerReference(api_version="v1", kind="Node", name="n", uid="u").to_dict()
    assert set(data) == {"apiVersion", "kind", "name", "uid"}


def test_type_and_list_meta_round_trip():
    tm = TypeMeta(kind="ZFSVolume", api_version="zfs.openebs.io/v1")
    assert TypeMeta.from_dict(tm.to_dict()) == tm
    lm = ListMeta(resource_version="7", continue_token="next")
    assert ListMeta.from_dict(lm.to_dict()) == lm
    assert TypeMeta().to_dict() == {}


class _Alpha:
    pass


class _Beta:
    pass


def test_scheme_registration():
    scheme = Scheme()
    scheme.add_known_types(GV, _Alpha, _Beta)
    assert scheme.recognizes(GV, "_Alpha")
    assert not scheme.recognizes(GroupVersion("zfs.openebs.io", "v1alpha1"), "_Alpha")
    assert scheme.known_types(GV) == {"_Alpha": _Alpha, "_Beta": _Beta}


def test_scheme_known_types_is_a_copy():
    scheme = Scheme()
    scheme.add_known_types(GV, _Alpha)
    scheme.known_types(GV).clear()
    assert scheme.recognizes(GV, "_Alpha")


def test_scheme_rejects_conflicting_kind():
    scheme = Scheme()
    scheme.add_known_types(GV, _Alpha)
    other = type("_Alpha", (), {})
    with pytest.raises(ValueError):
        scheme.add_known_types(GV, other)


def test_scheme_rejects_non_class():
    with pytest.raises(TypeError):
        Scheme().add_known_types(GV, "ZFSVolume")