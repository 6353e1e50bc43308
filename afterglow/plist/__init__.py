# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Binary property list encoding and keyed archives.

Produces the byte-exact blobs Terminal.app reads from ``.terminal``
profiles.
"""

from afterglow.plist.archive import (
    build_color_archive,
    build_font_archive,
    encode_ns_color,
    encode_ns_font,
)
from afterglow.plist.encoder import (
    PlistEncodingError,
    PlistFloat,
    PlistUID,
    encode_binary_plist,
)

__all__ = [
    "encode_binary_plist",
    "PlistUID",
    "PlistFloat",
    "PlistEncodingError",
    "build_color_archive",
    "build_font_archive",
    "encode_ns_color",
    "encode_ns_font",
]
