"""Reporters that turn lint results into output.

Importing this package registers the built-in reporters: ``text``,
``json``, ``check-run`` and ``github``.
"""
from __future__ import annotations

from patlint.reporting.base import ENTRYPOINT_GROUP, Reporter, get_reporter, reporter_registry
from patlint.reporting.check_run import CheckRunReporter, build_check_run
from patlint.reporting.github import GithubActionsReporter, workflow_command
from patlint.reporting.json_reporter import JsonReporter, result_to_dict
from patlint.reporting.text import TextReporter

__all__ = [
    "ENTRYPOINT_GROUP",
    "Reporter",
    "reporter_registry",
    "get_reporter",
    "TextReporter",
    "JsonReporter",
    "result_to_dict",
    "CheckRunReporter",
    "build_check_run",
    "GithubActionsReporter",
    "workflow_command",
]
