# json_workbench/infrastructure/dispatch/_dispatcher.py

"""Offload heavy operations to worker processes with a synchronous fallback

Two paths produce the same results:

- ``run_task_sync`` runs a request in the calling process.
- ``TaskDispatcher.dispatch`` submits it to an executor and waits a bounded
  time, falling back to ``run_task_sync`` whenever the offloaded path cannot
  deliver a response for this exact request.
"""

# Standard library imports
from concurrent.futures import Executor
from concurrent.futures import Future
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from logging import getLogger
from multiprocessing import cpu_count
from multiprocessing import get_start_method
from typing import Any
from typing import Callable
from uuid import uuid4

# Local imports
from json_workbench.application.diff import diff_lines
from json_workbench.application.formatting import compact_json
from json_workbench.application.formatting import format_json
from json_workbench.application.formatting import smart_format_json
from json_workbench.application.formatting import sort_json_keys
from json_workbench.application.parsing import parse_json
from json_workbench.application.repair import repair_json
from json_workbench.application.validation import SchemaCache
from json_workbench.application.validation import validate_json_schema
from json_workbench.core.domain.enums import TaskKind

logger = getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True, frozen=True)
class TaskRequest:
    """One unit of work for the dispatcher

    ``payload`` holds the keyword arguments of the operation named by ``kind``
    and must be picklable.
    """

    kind: TaskKind
    payload: dict[str, Any] = field(default_factory=dict)
    request_id: str = field(default_factory=lambda: uuid4().hex)


@dataclass(slots=True, frozen=True)
class TaskResponse:
    """Result of a request and how it was produced"""

    request_id: str
    result: Any = None
    offloaded: bool = False
    fallback_reason: str | None = None


_TASKS: dict[TaskKind, Callable[..., Any]] = {
    TaskKind.PARSE: parse_json,
    TaskKind.REPAIR: repair_json,
    TaskKind.FORMAT: format_json,
    TaskKind.COMPACT: compact_json,
    TaskKind.SMART_FORMAT: smart_format_json,
    TaskKind.SORT_KEYS: sort_json_keys,
    TaskKind.VALIDATE: validate_json_schema,
    TaskKind.LINE_DIFF: diff_lines,
}


def run_task_sync(request: TaskRequest, schema_cache: SchemaCache | None = None) -> TaskResponse:
    """Run a request in the calling process

    Args:
        request: Work to perform
        schema_cache: Cache handed to validation requests; the process default
            when omitted

    Returns:
        TaskResponse with ``offloaded=False``

    Raises:
        TypeError: If the payload does not fit the operation's signature
    """
    kind = TaskKind(request.kind)
    payload = dict(request.payload)
    if kind is TaskKind.VALIDATE and schema_cache is not None:
        payload["cache"] = schema_cache
    result = _TASKS[kind](**payload)
    return TaskResponse(request_id=request.request_id, result=result)


def _run_in_worker(request: TaskRequest) -> TaskResponse:
    """Worker-side entry point; runs in the executor"""
    return replace(run_task_sync(request), offloaded=True)


class TaskDispatcher:
    """Submit requests to an executor and fall back to the calling process

    The dispatcher never terminates a worker. A request that times out is
    abandoned with a best-effort ``cancel()``; whatever it produces later is
    discarded with the future.
    """

    def __init__(
        self,
        enabled: bool = True,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_workers: int | None = None,
        executor: Executor | None = None,
        schema_cache: SchemaCache | None = None,
    ) -> None:
        """Initialize the dispatcher

        Args:
            enabled: When False every request runs in the calling process
            timeout_seconds: How long to wait for an offloaded response
            max_workers: Worker processes for the default pool (default:
                cpu_count - 1)
            executor: Executor to submit to instead of a private process pool;
                the caller keeps ownership of it
            schema_cache: Cache used by validation requests on the fallback path
        """
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self.enabled = enabled
        self.timeout_seconds = timeout_seconds
        self.schema_cache = schema_cache
        self._executor = executor
        self._owns_executor = executor is None

        if max_workers is None:
            max_workers = max(1, cpu_count() - 1)
            logger.debug(f"No worker count specified, using default: {max_workers}")
        else:
            logger.debug(f"Using specified worker count: {max_workers}")
        self.max_workers = max_workers

    def __enter__(self) -> "TaskDispatcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_executor(self) -> Executor:
        if self._executor is None:
            logger.debug(
                f"Starting worker pool with {self.max_workers} process(es) "
                f"using {get_start_method()} start method"
            )
            self._executor = ProcessPoolExecutor(max_workers=self.max_workers)
        return self._executor

    def _discard_executor(self) -> None:
        """Drop a private pool that can no longer accept work"""
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def _fallback(self, request: TaskRequest, reason: str) -> TaskResponse:
        logger.warning(f"Running {TaskKind(request.kind).value} task in process: {reason}")
        response = run_task_sync(request, self.schema_cache)
        return replace(response, fallback_reason=reason)

    def dispatch(self, request: TaskRequest) -> TaskResponse:
        """Run a request, offloaded when possible

        Args:
            request: Work to perform

        Returns:
            TaskResponse whose ``offloaded`` flag records which path produced it
        """
        if not self.enabled:
            return run_task_sync(request, self.schema_cache)

        try:
            future: Future[TaskResponse] = self._get_executor().submit(_run_in_worker, request)
        except Exception as e:
            # BrokenProcessPool, a shut down executor, or no process support
            self._discard_executor()
            return self._fallback(request, f"executor unavailable ({type(e).__name__}: {e})")

        try:
            response = future.result(timeout=self.timeout_seconds)
        except TimeoutError:
            future.cancel()
            return self._fallback(request, f"timed out after {self.timeout_seconds}s")
        except Exception as e:
            return self._fallback(request, f"worker error ({type(e).__name__}: {e})")

        if response.request_id != request.request_id:
            return self._fallback(
                request, f"response id {response.request_id} does not match {request.request_id}"
            )
        return response

    def run(self, kind: TaskKind | str, **payload: Any) -> Any:
        """Dispatch an operation by kind and return only its result"""
        return self.dispatch(TaskRequest(kind=TaskKind(kind), payload=payload)).result

    def close(self) -> None:
        """Shut down the private pool; injected executors are left running"""
        self._discard_executor()
