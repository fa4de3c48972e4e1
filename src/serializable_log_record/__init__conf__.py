"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "serializable_log_record"
title = "Capture stdlib log records into serialisable form and re-hydrate them"
version = "0.3.2"
homepage = "https://github.com/8192K/serializable_log_record"
author = "Sebastian Frehmel"
author_email = "8192K@sebastianfrehmel.de"
shell_command = "serializable-log-record"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner, one field per line.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for serializable_log_record:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer or (lambda text: print(text, end=""))
    for line in lines:
        emit(line)
