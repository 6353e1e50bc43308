# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""JSON theme serializer, the same shape as shared theme definition files."""

from __future__ import annotations

import json

from afterglow.schema import Theme


def serialize_json(theme: Theme) -> str:
    """Pretty-printed JSON of a theme, without its provenance tag.

    Example::

        {
          "id": "deep-ocean",
          "name": "Deep Ocean",
          "subtitle": "Cold and calm",
          "emoji": "🌊",
          "colors": {
            "background": "#0B1622",
            ...
          }
        }
    """
    return json.dumps(theme.to_dict(include_source=False), indent=2, ensure_ascii=False)
