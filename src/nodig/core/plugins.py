"""Plugin host and plugin loading

Plugins are plain objects. Any subset of the hooks below may be implemented;
a missing hook is skipped. Hooks may be regular or coroutine functions.

Document-level hooks run inside ``transform_content`` and are isolated per
plugin. Build-level hooks run through ``PluginHost.run_hook`` and propagate
failures to the caller.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Iterable, Protocol


logger = logging.getLogger(__name__)

DOCUMENT_HOOKS = ("before_build", "transform_content", "after_build")
BUILD_HOOKS = ("on_build_start", "on_vault_parsed", "on_page_generated", "on_build_end")


class DocumentPlugin(Protocol):
    def before_build(self, ctx: dict[str, Any]) -> Any: ...
    def transform_content(self, content: str, metadata: dict[str, Any]) -> str: ...
    def after_build(self, ctx: dict[str, Any]) -> Any: ...


class BuildPlugin(Protocol):
    def on_build_start(self, ctx: dict[str, Any]) -> Any: ...
    def on_vault_parsed(self, ctx: dict[str, Any]) -> Any: ...
    def on_page_generated(self, ctx: dict[str, Any]) -> Any: ...
    def on_build_end(self, ctx: dict[str, Any]) -> Any: ...


class PluginNotFoundError(Exception):
    """Raised when a plugin import spec cannot be resolved."""

    def __init__(self, spec: str, reason: str | None = None):
        self.spec = spec
        msg = f"Plugin '{spec}' not found"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


def plugin_name(plugin: object) -> str:
    return getattr(plugin, "name", None) or type(plugin).__name__


def get_hook(plugin: object, name: str):
    """Return the plugin's callable hook, or None when it does not implement it."""
    hook = getattr(plugin, name, None)
    return hook if callable(hook) else None


async def call_hook(hook, *args) -> Any:
    """Invoke a hook, awaiting the result when the hook is asynchronous."""
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class PluginHost:
    """Runs build-level hooks across an ordered plugin list, one plugin at a time."""

    def __init__(self, plugins: Iterable[object] = ()):
        self.plugins = list(plugins)

    async def run_hook(self, name: str, context: Any) -> None:
        """Call hook name on every plugin that has it, in list order. Errors propagate."""
        for plugin in self.plugins:
            hook = get_hook(plugin, name)
            if hook is None:
                continue
            logger.debug("Running %s on plugin %s", name, plugin_name(plugin))
            await call_hook(hook, context)


def load_plugin(spec: str) -> object:
    """Import 'package.module:attribute'; a callable attribute is treated as a factory."""
    module_path, sep, attr = spec.partition(":")
    if not sep or not module_path or not attr:
        raise PluginNotFoundError(spec, "expected 'module:attribute'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise PluginNotFoundError(spec, str(e)) from e
    try:
        target = getattr(module, attr)
    except AttributeError as e:
        raise PluginNotFoundError(spec, f"module has no attribute '{attr}'") from e
    return target() if callable(target) else target


def load_plugins(specs: Iterable[str]) -> list[object]:
    return [load_plugin(s) for s in specs]
