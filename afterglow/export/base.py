# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""Base types for exporters."""

from enum import Enum


class ExportFormat(Enum):
    """Export target."""

    TERMINAL = "terminal"
    JSON = "json"
    CSS = "css"


class UnsupportedExportFormat(ValueError):
    """Raised when asked for an export target that does not exist."""
