# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""CSS custom property serializer."""

from __future__ import annotations

import re

from afterglow.schema import Theme

_UPPER_RE = re.compile(r"[A-Z]")


def to_kebab(name: str) -> str:
    """camelCase → kebab-case (``brightBlack`` → ``bright-black``)."""
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)


def serialize_css_vars(theme: Theme) -> str:
    """One custom property per colour slot inside a single ``:root`` block.

    Example::

        :root {
          --background: #0B1622;
          --text: #D4DDE8;
          ...
          --bright-white: #F1F5FA;
        }
    """
    lines = [":root {"]
    for slot, value in theme.colors.items():
        lines.append(f"  --{to_kebab(slot)}: {value};")
    lines.append("}")
    return "\n".join(lines)
