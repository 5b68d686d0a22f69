"""Classify command: show how property names are classified."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table

from layoutsync.sync.classifier import PropertyClass, classification_rule, classify

_CLASS_STYLES = {
    PropertyClass.SYNC: "[green]sync[/]",
    PropertyClass.PLATFORM_SPECIFIC: "[yellow]platform-specific[/]",
}


def build_classification_table(names: list[str]) -> Table:
    table = Table(title="Property classification")
    table.add_column("Property", style="bold")
    table.add_column("Class")
    table.add_column("Rule", style="dim")
    for name in names:
        table.add_row(name, _CLASS_STYLES[classify(name)], classification_rule(name))
    return table


def run_classify(args: argparse.Namespace, *, console: Console | None = None) -> int:
    (console or Console()).print(build_classification_table(args.names))
    return 0


__all__ = ["build_classification_table", "run_classify"]
