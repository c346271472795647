# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_list import TaskList


@dataclass(slots=True)
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any
    task_list: TaskList
