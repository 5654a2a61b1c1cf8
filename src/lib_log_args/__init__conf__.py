"""Static package metadata surfaced by the CLI."""

from __future__ import annotations

name = "lib_log_args"
title = "Argument-normalising, lazily evaluated level methods for structured loggers"
version = "0.1.0"
shell_command = "lib_log_args"


def info_lines() -> list[str]:
    """Return the metadata banner as individual lines.

    Examples
    --------
    >>> info_lines()[0]
    'Info for lib_log_args:'
    """

    fields = [("name", name), ("title", title), ("version", version), ("shell_command", shell_command)]
    width = max(len(label) for label, _ in fields)
    return [f"Info for {name}:", ""] + [f"    {label.ljust(width)} = {value}" for label, value in fields]


def print_info() -> None:
    """Print the metadata banner."""

    print("\n".join(info_lines()))
