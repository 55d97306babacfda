"""Plugin discovery and scalar registration.

Sources, in order:
1. setuptools entry points in the ``scalarctl.plugins`` group
2. single-file plugins in a local directory (``.scalarctl/plugins/``)

Each plugin may implement ``register_scalar_types``; the returned
descriptors are fed into :func:`scalarctl.domain.registry.register_scalar`.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

import pluggy

from scalarctl.plugins.hookspecs import PROJECT_NAME, ScalarctlHookSpec

ENTRY_POINT_GROUP = "scalarctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and scalar registration."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ScalarctlHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point and local plugins, then register their scalars.

        Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        if local_dir is not None:
            self._discover_local(local_dir)
        for plugin in self._pm.get_plugins():
            self._register_plugin_scalars(plugin, self._name_of(plugin))
        return self.list_plugin_names()

    def list_plugin_names(self) -> list[str]:
        return [self._name_of(p) for p in self._pm.get_plugins()]

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Load each ``*.py`` in *local_dir* (skipping ``_``-prefixed files).

        Classes defined in the module that carry hookimpl-decorated methods
        are instantiated and registered. A broken file is logged and skipped.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"scalarctl_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self._pm.register(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )
                    continue
                logger.debug("Loaded local plugin %s from %s", obj.__name__, py_file)

    def _instantiate_class_plugins(self) -> None:
        """Replace plugin classes registered by entry points with instances."""
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue
            self._pm.register(instance, name=plugin_name)

    # ------------------------------------------------------------------
    # Scalar registration
    # ------------------------------------------------------------------

    @staticmethod
    def _register_plugin_scalars(plugin: object, plugin_name: str) -> None:
        """Register the scalars exposed by a single plugin instance."""
        from scalarctl.domain.registry import register_scalar

        hook = getattr(plugin, "register_scalar_types", None)
        if hook is None:
            return

        try:
            scalar_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect scalar types from plugin %s", plugin_name, exc_info=True
            )
            return

        if scalar_map is None:
            return
        if not isinstance(scalar_map, dict):
            logger.warning("Plugin %s returned non-dict scalar registrations", plugin_name)
            return

        for name, scalar in scalar_map.items():
            try:
                register_scalar(name, scalar)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping scalar registration %r from plugin %s",
                    name,
                    plugin_name,
                    exc_info=True,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has methods marked with ``@hookimpl``.

        ``HookimplMarker("scalarctl")`` sets a ``scalarctl_impl`` attribute
        on decorated functions.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
