# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Export dispatch.

Turns a theme into a finished file artifact (name, media type, bytes).
Delivering the artifact (download, clipboard) is the caller's job. The
whole artifact is built before it is returned, so a failure never leaves
a partial file behind.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from afterglow.export.base import ExportFormat, UnsupportedExportFormat
from afterglow.export.css import serialize_css_vars
from afterglow.export.json_theme import serialize_json
from afterglow.export.terminal import TerminalExportOptions, serialize_terminal
from afterglow.schema import Theme

logger = logging.getLogger(__name__)

# format → (file extension, media type)
_FILE_TYPES = {
    ExportFormat.TERMINAL: ("terminal", "text/xml"),
    ExportFormat.JSON: ("json", "application/json"),
    ExportFormat.CSS: ("css", "text/css"),
}


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    """
    A finished export.

    Attributes:
        filename: Suggested file name, e.g. "deep-ocean.terminal"
        media_type: MIME type of the content
        content: UTF-8 encoded file content
    """
    filename: str
    media_type: str
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


def slugify(name: str) -> str:
    """File-name slug: lower-case ASCII letters, digits and single hyphens."""
    slug = name.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()


def _resolve_format(format: Union[ExportFormat, str]) -> ExportFormat:
    if isinstance(format, ExportFormat):
        return format
    try:
        return ExportFormat(format)
    except ValueError:
        raise UnsupportedExportFormat(f"Unsupported export format: {format!r}") from None


def export_theme(
    theme: Theme,
    format: Union[ExportFormat, str] = ExportFormat.TERMINAL,
    *,
    options: Optional[TerminalExportOptions] = None,
) -> ExportArtifact:
    """Export a theme to one of the supported file formats.

    Args:
        theme: Theme to export (not modified).
        format: Target format, as an ExportFormat or its string value.
        options: Terminal profile settings; ignored by other formats.

    Returns:
        ExportArtifact with file name, media type and content.

    Raises:
        UnsupportedExportFormat: If ``format`` names no known target.
    """
    fmt = _resolve_format(format)

    if fmt == ExportFormat.TERMINAL:
        text = serialize_terminal(theme, options)
    elif fmt == ExportFormat.JSON:
        text = serialize_json(theme)
    else:
        text = serialize_css_vars(theme)

    extension, media_type = _FILE_TYPES[fmt]
    slug = slugify(theme.name) or "theme"
    artifact = ExportArtifact(
        filename=f"{slug}.{extension}",
        media_type=media_type,
        content=text.encode("utf-8"),
    )
    logger.debug("Exported theme %r as %s (%d bytes)", theme.id, fmt.value, len(artifact.content))
    return artifact
