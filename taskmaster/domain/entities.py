from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskEntity:
    id: int
    title: str
    description: str = ""
    is_completed: bool = False


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    completed: int = 0
    pending: int = 0
