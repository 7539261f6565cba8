"""Enumerations for the dtoview package."""

from __future__ import annotations

from enum import IntFlag


class JsonOption(IntFlag):
    """
    Formatting flags accepted by :func:`dtoview.json_codec.encode`.

    Attributes:
        NONE: Compact output with ASCII escaping
        PRETTY_PRINT: Indent nested structures and use spaced separators
        SORT_KEYS: Emit object keys in sorted order
        UNESCAPED_UNICODE: Emit non-ASCII characters literally
        FORCE_OBJECT: Render a top-level list as an object keyed by index
    """
    NONE = 0
    PRETTY_PRINT = 1
    SORT_KEYS = 2
    UNESCAPED_UNICODE = 4
    FORCE_OBJECT = 8

    @classmethod
    def from_names(cls, names: str) -> JsonOption:
        """Combine a comma separated list of flag names, e.g. ``"pretty_print, sort_keys"``."""
        options = cls.NONE
        for raw_name in names.split(","):
            name = raw_name.strip().replace("-", "_").upper()
            if not name:
                continue
            try:
                options |= cls[name]
            except KeyError as error:
                raise ValueError(f"Unknown JSON option '{raw_name.strip()}'") from error
        return options


__all__ = ["JsonOption"]
