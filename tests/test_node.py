import pytest

from zfslocalpv.base import BuildError
from zfslocalpv.meta import OwnerReference
from zfslocalpv.node import NodeBuilder, NodeResource
from zfslocalpv.v1 import Pool, ZFSNode


def _pools():
    return [
        Pool(name="zfspv-pool", uuid="uuid-1", free="10Gi", used="1Gi"),
        Pool(name="other", uuid="uuid-2", free="5Gi", used="0"),
    ]


def test_build_node_with_pools_and_owner():
    owner = OwnerReference(api_version="v1", kind="Node", name="node-a", uid="uid-a", controller=True)
    node = (
        NodeBuilder()
        .with_name("node-a")
        .with_namespace("openebs")
        .with_pools(_pools())
        .with_owner_references(owner)
        .build()
    )
    assert node.metadata.name == "node-a"
    assert node.metadata.namespace == "openebs"
    assert [p.name for p in node.pools] == ["zfspv-pool", "other"]
    assert node.metadata.owner_references == [owner]


def test_with_pools_replaces_previous():
    node = NodeBuilder().with_pools(_pools()).with_pools([Pool(name="only")]).build()
    assert [p.name for p in node.pools] == ["only"]


def test_with_owner_references_replaces_previous():
    first = OwnerReference(name="a")
    second = OwnerReference(name="b")
    node = NodeBuilder().with_owner_references(first).with_owner_references(second).build()
    assert node.metadata.owner_references == [second]


def test_built_node_round_trips():
    node = (
        NodeBuilder()
        .with_name("node-a")
        .with_pools(_pools())
        .with_owner_references(OwnerReference(api_version="v1", kind="Node", name="node-a", uid="u"))
        .build()
    )
    assert ZFSNode.from_dict(node.to_dict()) == node


def test_missing_name_and_namespace():
    with pytest.raises(BuildError) as info:
        NodeBuilder().with_namespace("").with_name("").build()
    assert info.value.errors == [
        "failed to build zfs node object: missing namespace",
        "failed to build zfs node object: missing name",
    ]


def test_build_from_none():
    with pytest.raises(BuildError) as info:
        NodeBuilder.build_from(None).with_pools(_pools()).build()
    assert info.value.errors == ["failed to build zfs node object: nil node"]


def test_build_from_existing():
    existing = ZFSNode()
    built = NodeBuilder.build_from(existing).with_pools(_pools()).build()
    assert built is existing
    assert len(existing.pools) == 2


def test_node_resource():
    node = NodeBuilder().with_labels({"k": "v"}).build()
    assert NodeResource(node).has_label("k", "v") is True
    assert NodeResource(node).is_nil() is False
    assert NodeResource().is_nil() is True