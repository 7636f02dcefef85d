"""Reporter base class and the reporter registry."""
from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console

from patlint.linter.engine import LintResult
from patlint.plugins.registry import PluginRegistry

ENTRYPOINT_GROUP = "patlint.reporters"


class Reporter(ABC):
    """Turns a ``LintResult`` into output for some consumer."""

    @abstractmethod
    def render(self, result: LintResult) -> str:
        """Return the complete report as text."""

    def write(self, result: LintResult, console: Console) -> None:
        """Print the report to ``console``.

        The default prints ``render`` verbatim; reporters with rich
        output override this.
        """
        console.print(self.render(result), markup=False, highlight=False, emoji=False, soft_wrap=True)


reporter_registry: PluginRegistry[Reporter] = PluginRegistry(Reporter, "reporters")


def get_reporter(name: str) -> Reporter:
    """Instantiate the reporter registered under ``name``.

    Entry-point reporters are loaded on first lookup of an unknown name.

    Raises
    ------
    patlint.plugins.PluginNotFoundError
        If no reporter has that name.
    """
    if name not in reporter_registry:
        reporter_registry.load_entrypoints(ENTRYPOINT_GROUP)
    return reporter_registry.get(name)()
