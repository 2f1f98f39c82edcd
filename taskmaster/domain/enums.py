from __future__ import annotations

from enum import StrEnum


class OperationKind(StrEnum):
    ADD = "add"
    REMOVE = "remove"
