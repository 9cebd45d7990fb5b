"""Static package metadata surfaced to CLI commands and configuration discovery.

Contents:
    * Distribution identity (``name``, ``title``, ``version``)
    * Console command name used in help and version output
    * ``LAYEREDCONF_*`` identifiers that select lib_layered_config search paths
    * :func:`print_info` - render the metadata block for ``lambda-nats info``
"""

from __future__ import annotations

name = "lambda_nats"
title = "Hello-from-Lambda handler with a NATS lifecycle extension"
version = "0.1.0"
author = "lambda-nats maintainers"
shell_command = "lambda-nats"

#: Vendor/app/slug triple passed to :func:`lib_layered_config.read_config`.
LAYEREDCONF_VENDOR = "lambda-nats"
LAYEREDCONF_APP = "lambda-nats"
LAYEREDCONF_SLUG = "lambda-nats"


def print_info() -> None:
    """Print resolved metadata so users can inspect installation details.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for lambda_nats:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
