# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Keyed-archive object graphs for Terminal.app profiles.

Terminal.app stores colours and fonts as NSKeyedArchiver blobs. Only two
graphs are produced here, each with the fixed envelope:

    {
      "$archiver": "NSKeyedArchiver",
      "$version": 100000,
      "$top": {"root": UID(1)},
      "$objects": ["$null", <root object>, ... <class descriptor>],
    }

Key names, key order and constants are what Terminal.app expects; they
are not configurable.
"""

from __future__ import annotations

from afterglow.color.colorspace import hex_to_srgb
from afterglow.plist.encoder import PlistFloat, PlistUID, encode_binary_plist

ARCHIVER_NAME = "NSKeyedArchiver"
ARCHIVER_VERSION = 100000
FONT_FLAGS = 16


def _format_component(value: float) -> str:
    """Shortest round-tripping decimal; integral values without a fraction."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _envelope(objects: list) -> dict:
    return {
        "$archiver": ARCHIVER_NAME,
        "$version": ARCHIVER_VERSION,
        "$top": {"root": PlistUID(1)},
        "$objects": objects,
    }


def build_color_archive(hex_color: str) -> dict:
    """
    NSColor archive graph for a hex colour.

    The NSRGB payload is ``"r g b"`` as raw bytes, each channel the plain
    byte ratio (channel / 255, no gamma linearisation).
    """
    rgb = " ".join(_format_component(c) for c in hex_to_srgb(hex_color))
    return _envelope([
        "$null",
        {
            "$class": PlistUID(2),
            "NSRGB": rgb.encode("ascii"),
        },
        {
            "$classname": "NSColor",
            "$classes": ["NSColor", "NSObject"],
        },
    ])


def build_font_archive(name: str, size: float) -> dict:
    """
    NSFont archive graph.

    Object 1 is the font record, object 2 the font name it points at,
    object 3 the class descriptor.
    """
    return _envelope([
        "$null",
        {
            "$class": PlistUID(3),
            "NSName": PlistUID(2),
            "NSSize": PlistFloat(size),
            "NSfFlags": FONT_FLAGS,
        },
        name,
        {
            "$classname": "NSFont",
            "$classes": ["NSFont", "NSObject"],
        },
    ])


def encode_ns_color(hex_color: str) -> bytes:
    """Binary plist of an NSColor keyed archive."""
    return encode_binary_plist(build_color_archive(hex_color))


def encode_ns_font(name: str, size: float) -> bytes:
    """Binary plist of an NSFont keyed archive."""
    return encode_binary_plist(build_font_archive(name, size))
