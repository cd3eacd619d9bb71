"""Process-level wiring for the products RPC worker.

``start()`` runs once per worker process, before any task is consumed:
it opens the database connection and builds the ``ProductService``
that every task run shares.  ``stop()`` releases both.  Task handlers
obtain the service through ``get_service()``, which refuses to run
against a process that was never started.
"""

from __future__ import annotations

from typing import Optional

import structlog
from celery.signals import (
    worker_init,
    worker_process_init,
    worker_process_shutdown,
    worker_ready,
    worker_shutdown,
)
from django.conf import settings
from django.db import connections

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

_service: Optional[ProductService] = None


def start() -> ProductService:
    global _service

    connections["default"].ensure_connection()
    logger.info("database.connected", vendor=connections["default"].vendor)

    _service = ProductService(repository=ProductDjangoRepository())
    return _service


def stop() -> None:
    global _service

    _service = None
    connections.close_all()
    logger.info("database.disconnected")


def get_service() -> ProductService:
    if _service is None:
        raise RuntimeError("Products runtime not started; call runtime.start() first.")
    return _service


# ---------------------------------------------------------------------------
# Celery worker lifecycle
# ---------------------------------------------------------------------------


# Pools that run tasks in the worker process itself, so no
# ``worker_process_init`` is ever sent.
_IN_PROCESS_POOLS = frozenset({"solo", "thread", "threads", "gevent", "eventlet"})


def _runs_tasks_in_process(worker) -> bool:
    pool_cls = getattr(worker, "pool_cls", None)
    if isinstance(pool_cls, str):
        name = pool_cls
    else:
        name = getattr(pool_cls, "__module__", "")
    return name.rsplit(".", 1)[-1] in _IN_PROCESS_POOLS


@worker_process_init.connect
def _start_on_process_boot(**kwargs) -> None:
    start()


@worker_init.connect
def _start_on_worker_boot(sender=None, **kwargs) -> None:
    # Prefork parents never run tasks; each child starts its own runtime.
    if _runs_tasks_in_process(sender):
        start()


@worker_process_shutdown.connect
@worker_shutdown.connect
def _stop_on_worker_shutdown(**kwargs) -> None:
    stop()


@worker_ready.connect
def _announce(**kwargs) -> None:
    logger.info(
        "products_ms.running",
        queue=settings.PRODUCTS_QUEUE,
        port=settings.PORT,
    )
