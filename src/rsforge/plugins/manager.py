"""Plugin discovery and hook dispatch.

Third-party plugins are found through the ``rsforge.plugins`` entry-point
group. The built-in git plugin is registered directly by the CLI context.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from rsforge.plugins.hookspecs import RsforgeHookSpec

PROJECT_NAME = "rsforge"
ENTRY_POINT_GROUP = "rsforge.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` with rsforge hook specs."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RsforgeHookSpec)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return every registered plugin name."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        for plugin in list(self._pm.get_plugins()):
            if inspect.isclass(plugin) and self._has_hook_impls(plugin):
                self._instantiate(plugin)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance under *name* (default: its class name)."""
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def _instantiate(self, plugin_cls: type) -> None:
        """Swap a class registered by entry-point loading for an instance of it.

        Hooks on a bare class would be called without ``self``. A class that
        cannot be constructed is dropped with a warning.
        """
        name = self._pm.get_name(plugin_cls) or plugin_cls.__name__
        self._pm.unregister(plugin_cls)
        try:
            instance = plugin_cls()
        except Exception:
            logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
            return
        self._pm.register(instance, name=name)
        logger.debug("Instantiated entry-point plugin: %s", name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """True when any public attribute of *cls* carries the ``rsforge_impl`` marker."""
        return any(
            getattr(getattr(cls, attr, None), f"{PROJECT_NAME}_impl", None)
            for attr in dir(cls)
            if not attr.startswith("_")
        )
