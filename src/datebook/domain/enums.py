from __future__ import annotations

from enum import Enum


class FormMode(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"
