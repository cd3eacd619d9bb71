import uuid
from contextvars import ContextVar
from typing import Any, Optional

import structlog
from celery.signals import before_task_publish, task_postrun, task_prerun

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

CORRELATION_HEADER = "x_correlation_id"


def _header_from_request(task: Any) -> Optional[str]:
    request = getattr(task, "request", None)
    if request is None:
        return None
    value = getattr(request, CORRELATION_HEADER, None)
    if value:
        return value
    headers = getattr(request, "headers", None) or {}
    return headers.get(CORRELATION_HEADER)


@task_prerun.connect
def bind_correlation_id(sender: Any = None, task_id: str = "", task: Any = None, **kwargs) -> None:
    """Extract or generate a correlation ID for each task run.

    Reads the ``x_correlation_id`` message header set by the publisher.  If
    absent, generates a new UUID4.  The ID is stored in a ContextVar so
    structlog processors inject it into every log line of the run.
    """
    task = task or sender
    cid = _header_from_request(task) or str(uuid.uuid4())
    correlation_id_var.set(cid)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        correlation_id=cid,
        task_name=getattr(task, "name", None),
    )

    logger.info("task_started", task_id=task_id)


@task_postrun.connect
def clear_correlation_id(sender: Any = None, task_id: str = "", state: Optional[str] = None, **kwargs) -> None:
    logger.info("task_finished", task_id=task_id, state=state)
    structlog.contextvars.clear_contextvars()
    correlation_id_var.set("")


@before_task_publish.connect
def propagate_correlation_id(headers: Optional[dict] = None, **kwargs) -> None:
    """Stamp outgoing messages with the current correlation ID."""
    cid = correlation_id_var.get()
    if headers is not None and cid and CORRELATION_HEADER not in headers:
        headers[CORRELATION_HEADER] = cid
