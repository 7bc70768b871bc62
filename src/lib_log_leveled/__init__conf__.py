"""Static distribution metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_log_leveled"
title = "Leveled, structured-logging façade with immutable field chaining"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_leveled"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_leveled"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (default: stdout).

    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_leveled:
    ...
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
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)
