# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Theme exporters.

Each serializer formats a Theme for one target:

1. Terminal -- Terminal.app ``.terminal`` profile (XML with binary plists)
2. JSON -- Shareable theme definition
3. CSS -- Custom properties in a ``:root`` block

Exporters never modify the theme they are given.
"""

from afterglow.export.base import ExportFormat, UnsupportedExportFormat
from afterglow.export.css import serialize_css_vars
from afterglow.export.exporter import ExportArtifact, export_theme, slugify
from afterglow.export.json_theme import serialize_json
from afterglow.export.terminal import CursorType, TerminalExportOptions, serialize_terminal

__all__ = [
    "export_theme",
    "ExportArtifact",
    "ExportFormat",
    "UnsupportedExportFormat",
    "slugify",
    "serialize_terminal",
    "serialize_json",
    "serialize_css_vars",
    "TerminalExportOptions",
    "CursorType",
]
