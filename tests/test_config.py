from zfslocalpv import config


def test_default_is_empty():
    cfg = config.default()
    assert cfg == config.Config(
        driver_name="", plugin_type="", version="", endpoint="", nodename=""
    )


def test_default_returns_independent_instances():
    first = config.default()
    second = config.default()
    first.nodename = "node1"
    assert second.nodename == ""
    assert first != second


def test_fields_are_settable():
    cfg = config.default()
    cfg.endpoint = "unix://csi/csi.sock"
    cfg.driver_name = "zfs.csi.openebs.io"
    assert cfg.endpoint == "unix://csi/csi.sock"
    assert cfg.driver_name == "zfs.csi.openebs.io"