import os

from EnvLoader.Implementation.DictSink import DictSink
from EnvLoader.Implementation.OsEnvironSink import OsEnvironSink
from EnvLoader.Interface.IEnvSink import IEnvSink


def test_dict_sink_overwrites():
    sink = DictSink()
    sink.set("K", "1")
    sink.set("K", "2")
    assert sink.values == {"K": "2"}
    assert sink.get("missing") is None


def test_interface_cannot_be_instantiated():
    try:
        IEnvSink()
        assert False, "Expected TypeError"
    except TypeError:
        assert True


def test_os_environ_sink_sets_value(monkeypatch):
    monkeypatch.delenv("ENVLOADER_SINK_TEST", raising=False)
    OsEnvironSink().set("ENVLOADER_SINK_TEST", "value")
    assert os.environ["ENVLOADER_SINK_TEST"] == "value"


def test_os_environ_sink_without_override_keeps_existing(monkeypatch):
    monkeypatch.setenv("ENVLOADER_EXISTING", "original")
    monkeypatch.delenv("ENVLOADER_NEW", raising=False)
    sink = OsEnvironSink(override=False)
    sink.set("ENVLOADER_EXISTING", "from-file")
    sink.set("ENVLOADER_NEW", "first")
    sink.set("ENVLOADER_NEW", "second")
    assert os.environ["ENVLOADER_EXISTING"] == "original"
    assert os.environ["ENVLOADER_NEW"] == "second"
