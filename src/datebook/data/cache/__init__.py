from __future__ import annotations

from .date_index import DateIndex

__all__ = ["DateIndex"]
