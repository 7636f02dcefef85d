"""Named registry for pluggable patlint components.

Reporters (and any future extension point) are looked up by name through
a ``PluginRegistry``.  Built-in implementations register with the
``@registry.register("name")`` decorator at import time; third-party
packages add their own through an entry-point group, e.g. in their
``pyproject.toml``::

    [project.entry-points."patlint.reporters"]
    sarif = "patlint_sarif:SarifReporter"

and are picked up by ``registry.load_entrypoints("patlint.reporters")``.
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PluginNotFoundError(KeyError):
    """Raised when no plugin is registered under the requested name."""

    def __init__(self, name: str, registry_name: str, available: list[str]) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        choices = ", ".join(available) if available else "none"
        super().__init__(
            f"No {registry_name} plugin named {name!r}. Available: {choices}."
        )


class PluginAlreadyRegisteredError(ValueError):
    """Raised when a name is registered twice in the same registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(f"A {registry_name} plugin named {name!r} is already registered.")


class PluginRegistry(Generic[T]):
    """Maps names to implementations of one abstract base class.

    Parameters
    ----------
    base_class:
        Every registered class must subclass this.
    name:
        Registry name used in log and error messages, e.g. ``"reporters"``.
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._plugins: dict[str, type[T]] = {}

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator registering the class under ``name``.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is taken.
        TypeError
            If the class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} as {self._name} plugin {name!r}: "
                f"it must subclass {self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug("Registered %s plugin %r -> %s", self._name, name, cls.__qualname__)

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name, self.list_plugins()) from None

    def list_plugins(self) -> list[str]:
        """Return registered names in alphabetical order."""
        return sorted(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return f"PluginRegistry(name={self._name!r}, plugins={self.list_plugins()})"

    def load_entrypoints(self, group: str) -> None:
        """Register every plugin declared in the entry-point ``group``.

        Names that are already registered are skipped, so repeated calls
        are harmless.  An entry point that fails to import or is not a
        subclass of ``base_class`` is logged and skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("Entry-point %r already registered in %r; skipping", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r", ep.name, group)
                continue
            try:
                self.register_class(ep.name, cls)
            except TypeError as exc:
                logger.warning("Entry-point %r skipped: %s", ep.name, exc)
