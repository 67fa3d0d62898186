"""pluggy plugin manager for shieldctl.

Plugins come from two places: distributions exposing a ``shieldctl.plugins``
entry point, and ``*.py`` files in the directory named by
``[plugins] local_dir``.  Inside a local file, every class defining at least
one ``@hookimpl`` method is instantiated with no arguments and registered as
``<module name>.<class name>``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pluggy

from shieldctl.plugins.hookspecs import ShieldctlHookSpec

PROJECT_NAME = "shieldctl"
ENTRY_POINT_GROUP = "shieldctl.plugins"
LOCAL_MODULE_PREFIX = "shieldctl_local_plugin_"
_IMPL_MARKER = f"{PROJECT_NAME}_impl"

logger = logging.getLogger(__name__)


def _import_file(module_name: str, py_file: Path) -> ModuleType | None:
    spec = importlib.util.spec_from_file_location(module_name, py_file)
    if spec is None or spec.loader is None:
        logger.warning("Could not create module spec for %s", py_file)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
        sys.modules.pop(module_name, None)
        return None
    return module


def _defines_hooks(cls: type) -> bool:
    return any(
        callable(member) and getattr(member, _IMPL_MARKER, None)
        for name, member in inspect.getmembers(cls)
        if not name.startswith("_")
    )


def _hook_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in *module* itself that carry hook implementations."""
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ == module.__name__ and _defines_hooks(obj):
            yield obj


class PluginManager:
    """Wraps :class:`pluggy.PluginManager` with shieldctl's discovery rules."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ShieldctlHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """True once :meth:`discover_and_load` has run."""
        return self._loaded

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then local files; return registered names.

        A missing *local_dir* is not an error.
        """
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugin(s)", count)
        if local_dir is not None and local_dir.is_dir():
            for py_file in sorted(local_dir.glob("*.py")):
                if not py_file.name.startswith("_"):
                    self._load_local(py_file)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [name for name, plugin in self._pm.list_name_plugin() if plugin is not None]

    def _load_local(self, py_file: Path) -> None:
        # Broken files and classes are logged and skipped.
        module_name = f"{LOCAL_MODULE_PREFIX}{py_file.stem}"
        module = _import_file(module_name, py_file)
        if module is None:
            return
        for cls in _hook_classes(module):
            try:
                plugin = cls()
            except Exception:
                logger.warning(
                    "Failed to instantiate plugin class %s from %s",
                    cls.__name__,
                    py_file,
                    exc_info=True,
                )
                continue
            self.register_plugin(plugin, name=f"{module_name}.{cls.__name__}")
