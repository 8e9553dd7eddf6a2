from __future__ import annotations


class FormatError(ValueError):
    """ARC ASCII file content does not match the expected layout."""
