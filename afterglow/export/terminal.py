# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Terminal.app profile serializer.

Produces a ``.terminal`` document: an XML property list whose colour and
font values are base64 ``<data>`` blocks holding binary-plist keyed
archives. The dictionary keys are the ones Terminal.app looks up and must
not be renamed.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional
from xml.sax.saxutils import escape

from afterglow.plist.archive import encode_ns_color, encode_ns_font
from afterglow.schema import COLOR_SLOTS, Theme

logger = logging.getLogger(__name__)

PROFILE_TYPE = "Window Settings"

# Slot name → Terminal.app profile key
PROFILE_COLOR_KEYS = {
    "background": "BackgroundColor",
    "text": "TextColor",
    "bold": "TextBoldColor",
    "selection": "SelectionColor",
    "cursor": "CursorColor",
    "cursorText": "CursorTextColor",
    "black": "ANSIBlackColor",
    "red": "ANSIRedColor",
    "green": "ANSIGreenColor",
    "yellow": "ANSIYellowColor",
    "blue": "ANSIBlueColor",
    "magenta": "ANSIMagentaColor",
    "cyan": "ANSICyanColor",
    "white": "ANSIWhiteColor",
    "brightBlack": "ANSIBrightBlackColor",
    "brightRed": "ANSIBrightRedColor",
    "brightGreen": "ANSIBrightGreenColor",
    "brightYellow": "ANSIBrightYellowColor",
    "brightBlue": "ANSIBrightBlueColor",
    "brightMagenta": "ANSIBrightMagentaColor",
    "brightCyan": "ANSIBrightCyanColor",
    "brightWhite": "ANSIBrightWhiteColor",
}

_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
    '<plist version="1.0">'
)


class CursorType(IntEnum):
    """Terminal.app cursor shapes."""
    BLOCK = 0
    UNDERLINE = 1
    VERTICAL_BAR = 2


@dataclass(frozen=True)
class TerminalExportOptions:
    """Window and font settings written alongside the colours."""

    font_name: str = "JetBrainsMono-Regular"
    font_size: float = 14
    columns: int = 220
    rows: int = 50
    cursor_type: CursorType = CursorType.BLOCK
    cursor_blink: bool = True

    def __post_init__(self) -> None:
        if not self.font_name:
            raise ValueError("font_name cannot be empty")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be > 0, got {self.font_size}")
        if self.columns <= 0:
            raise ValueError(f"columns must be > 0, got {self.columns}")
        if self.rows <= 0:
            raise ValueError(f"rows must be > 0, got {self.rows}")
        # Accept plain ints for the cursor
        object.__setattr__(self, "cursor_type", CursorType(self.cursor_type))


def _data_entry(key: str, blob: bytes) -> list[str]:
    b64 = base64.b64encode(blob).decode("ascii")
    return [
        f"\t\t<key>{escape(key)}</key>",
        "\t\t<data>",
        f"\t\t{b64}",
        "\t\t</data>",
    ]


def serialize_terminal(
    theme: Theme,
    options: Optional[TerminalExportOptions] = None,
) -> str:
    """Serialize a theme as a Terminal.app profile.

    Args:
        theme: Theme to export (not modified).
        options: Font, window size and cursor settings.

    Returns:
        The complete XML document.

    Example (abridged)::

        <?xml version="1.0" encoding="UTF-8"?>
        <!DOCTYPE plist PUBLIC ...>
        <plist version="1.0">
            <dict>
                <key>BackgroundColor</key>
                <data>
                YnBsaXN0MDDUAQIDBAUGBwpYJGFyY2hpdmVy...
                </data>
        ...
                <key>name</key>
                <string>Deep Ocean</string>
                <key>type</key>
                <string>Window Settings</string>
            </dict>
        </plist>
    """
    if options is None:
        options = TerminalExportOptions()

    lines = [_HEADER, "\t<dict>"]

    # Colors
    for slot in COLOR_SLOTS:
        lines.extend(_data_entry(PROFILE_COLOR_KEYS[slot], encode_ns_color(theme.colors.get(slot))))

    # Font
    lines.extend(_data_entry("Font", encode_ns_font(options.font_name, options.font_size)))

    # Window settings
    blink = "true" if options.cursor_blink else "false"
    lines.extend([
        "\t\t<key>columnCount</key>",
        f"\t\t<integer>{int(options.columns)}</integer>",
        "\t\t<key>rowCount</key>",
        f"\t\t<integer>{int(options.rows)}</integer>",
        "\t\t<key>CursorType</key>",
        f"\t\t<integer>{int(options.cursor_type)}</integer>",
        "\t\t<key>CursorBlink</key>",
        f"\t\t<{blink}/>",
    ])

    # Theme name
    lines.extend([
        "\t\t<key>name</key>",
        f"\t\t<string>{escape(theme.name)}</string>",
        "\t\t<key>type</key>",
        f"\t\t<string>{PROFILE_TYPE}</string>",
    ])

    lines.extend(["\t</dict>", "</plist>", ""])
    logger.debug("Serialized Terminal.app profile for theme %r", theme.id)
    return "\n".join(lines)
