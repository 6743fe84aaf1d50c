"""Tests for PluginManager."""

from __future__ import annotations

import pluggy
import pytest

from rsforge.plugins.builtins.git import GitPlugin
from rsforge.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("rsforge")


class _Recorder:
    def __init__(self) -> None:
        self.names: list[str] = []

    @hookimpl
    def post_scaffold(self, project_name: str) -> None:
        self.names.append(project_name)


class _NoHooks:
    def unrelated(self) -> None:
        pass


class TestPluginManager:
    def test_register_and_dispatch(self) -> None:
        pm = PluginManager()
        recorder = _Recorder()
        pm.register_plugin(recorder, name="recorder")

        pm.hook.post_scaffold(
            project_name="demo", project_path="/tmp/demo", framework="axum", dependencies=[]
        )

        assert recorder.names == ["demo"]
        assert "recorder" in pm.list_plugin_names()

    def test_default_name_is_class_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(GitPlugin())
        assert pm.list_plugin_names() == ["GitPlugin"]

    def test_discover_and_load_without_entry_points(self) -> None:
        pm = PluginManager()
        assert pm.discover_and_load() == []

    def test_entry_point_class_is_instantiated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pm = PluginManager()

        def load(group: str) -> int:
            assert group == "rsforge.plugins"
            pm._pm.register(_Recorder, name="recorder")
            return 1

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", load)

        assert pm.discover_and_load() == ["recorder"]
        (plugin,) = pm._pm.get_plugins()
        assert isinstance(plugin, _Recorder)
        pm.hook.post_scaffold(
            project_name="demo", project_path="/tmp/demo", framework="axum", dependencies=[]
        )
        assert plugin.names == ["demo"]

    def test_unconstructible_entry_point_class_is_dropped(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        pm = PluginManager()

        class _NeedsArgs(_Recorder):
            def __init__(self, required: str) -> None:
                super().__init__()

        monkeypatch.setattr(
            pm._pm,
            "load_setuptools_entrypoints",
            lambda group: pm._pm.register(_NeedsArgs, name="needs-args"),
        )

        assert pm.discover_and_load() == []

    def test_has_hook_impls(self) -> None:
        assert PluginManager._has_hook_impls(_Recorder)
        assert PluginManager._has_hook_impls(GitPlugin)
        assert not PluginManager._has_hook_impls(_NoHooks)
