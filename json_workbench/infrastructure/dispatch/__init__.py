# json_workbench/infrastructure/dispatch/__init__.py

"""Background task dispatch with in-process fallback"""

# Local imports
from json_workbench.infrastructure.dispatch._dispatcher import DEFAULT_TIMEOUT_SECONDS
from json_workbench.infrastructure.dispatch._dispatcher import TaskDispatcher
from json_workbench.infrastructure.dispatch._dispatcher import TaskRequest
from json_workbench.infrastructure.dispatch._dispatcher import TaskResponse
from json_workbench.infrastructure.dispatch._dispatcher import run_task_sync

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "TaskDispatcher",
    "TaskRequest",
    "TaskResponse",
    "run_task_sync",
]
