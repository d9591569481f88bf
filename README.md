# zfslocalpv

Resource models and fluent builders for ZFS-backed local persistent volumes.

The package describes the custom resources used to provision ZFS volumes on a
node: volumes, snapshots, backups, restores and the per-node pool inventory.
It also has builders that check required fields, and list builders that
filter resources by label. It needs nothing outside the standard library.

## Installation

```
pip install zfslocalpv
```

## Resource models

Two API versions are provided, both in the `zfs.openebs.io` group:

- `zfslocalpv.v1` has `ZFSVolume`, `ZFSSnapshot`, `ZFSBackup`, `ZFSRestore`
  and `ZFSNode`, each with a list type such as `ZFSVolumeList`. It also has
  the spec and status types `VolumeInfo`, `VolStatus`, `SnapStatus`,
  `ZFSBackupSpec`, `ZFSRestoreSpec` and `Pool`, and the enums
  `ZFSBackupStatus` and `ZFSRestoreStatus` (`Done`, `Failed`, `Init`,
  `Pending`, `InProgress`, `Invalid`).
- `zfslocalpv.v1alpha1` has the older `ZFSVolume` and `ZFSSnapshot` shapes,
  whose `VolumeInfo` has no `shared` field.

The resources `ZFSVolume`, `ZFSSnapshot`, `ZFSBackup`, `ZFSRestore` and
`ZFSNode` convert to and from the JSON-shaped dictionaries of the cluster API
through `to_dict()` and the class method `from_dict()`. Optional fields that
are empty are left out of the output. A backup or restore status that names
no known value makes `from_dict()` raise `ValueError`. The list types support
`len()` and iteration.

Object metadata lives in `zfslocalpv.meta`: `TypeMeta`, `ObjectMeta`,
`ListMeta` and `OwnerReference`, with `GroupVersion`, `GroupVersionResource`
and `GroupResource` to name resources. Each version module has
`resource(name)`, which returns the `GroupResource` for that name in the API
group.

To register the types of a version with a `zfslocalpv.meta.Scheme`, call
`add_to_scheme`:

```python
from zfslocalpv import meta, v1

scheme = meta.Scheme()
v1.add_to_scheme(scheme)
assert scheme.recognizes(meta.GroupVersion("zfs.openebs.io", "v1"), "ZFSVolume")
```

`Scheme.known_types(group_version)` returns the registered kinds by name.
Registering a different class under a kind name that is already taken raises
`ValueError`.

## Builders

Each builder records every missing required field. `build()` then raises a
`zfslocalpv.base.BuildError`, a `ValueError` whose `errors` attribute lists
all of them:

```python
from zfslocalpv.volume import VolumeBuilder

vol = (
    VolumeBuilder()
    .with_name("pvc-1234")
    .with_namespace("openebs")
    .with_capacity("4294967296")
    .with_pool_name("zfspv-pool")
    .with_node_name("node-1")
    .with_fs_type("zfs")
    .with_volume_type("DATASET")
    .with_labels({"app": "db"})
    .build()
)
```

Every builder has `with_name`, `with_namespace`, `with_labels` (merges into
existing labels), `with_finalizer` (appends) and `build`. The class method
`build_from(obj)` starts from an existing object; passing `None` records an
error.

- `VolumeBuilder` (`zfslocalpv.volume`) sets every `VolumeInfo` field and the
  status state; capacity, pool name and node name are required.
- `SnapshotBuilder` (`zfslocalpv.snapshot`) has only the common steps.
- `NodeBuilder` (`zfslocalpv.node`) adds `with_pools` and
  `with_owner_references`.
- `BackupBuilder` (`zfslocalpv.backup`) adds `with_snap`, `with_prev_snap`,
  and the required `with_volume`, `with_node`, `with_status` and
  `with_remote`.
- `RestoreBuilder` (`zfslocalpv.restore`) adds `with_vol_spec` (copies the
  spec), the required `with_volume`, `with_node` and `with_remote`, and
  `with_status`, where an empty value clears the status.

A status string that names no known value raises `ValueError` at once.

## Filtering lists

```python
from zfslocalpv.base import has_label
from zfslocalpv.volume import VolumeListBuilder

ready = (
    VolumeListBuilder.from_list(volumes)
    .with_filter(has_label("app", "db"))
    .list()
)
```

`list()` keeps the objects that pass every filter, in their original order,
and returns them as the matching list type (`ZFSVolumeList` here).
`SnapshotListBuilder`, `BackupListBuilder` and `RestoreListBuilder` work the
same way. `has_labels` and `is_nil` are also available as predicates.

## Driver configuration

`zfslocalpv.config.default()` returns an empty `Config`. It holds the driver
name, plugin type, version, endpoint and node name.

## What this package does not do

It only models and builds resource objects in memory. It does not connect to
a cluster to create, read, update or delete them, it does not run ZFS
commands or manage pools, and it has no command-line driver or server.