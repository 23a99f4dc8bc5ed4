# releasekit/common/concurrency/fan_out.py
from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Callable, Tuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")

log = logging.getLogger(__name__)


def run_pair(
    left: Callable[[], A],
    right: Callable[[], B],
    *,
    name: str = "pair",
) -> Tuple[A, B]:
    """
    Run two blocking callables concurrently and join them.

    Both must succeed. As soon as either raises, the error is re-raised to the
    caller without waiting for the other one (a task that is already running
    cannot be interrupted; it finishes in the background and its result is dropped).
    """
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix=name)
    try:
        f_left: Future[A] = executor.submit(left)
        f_right: Future[B] = executor.submit(right)
        done, _ = wait([f_left, f_right], return_when=FIRST_EXCEPTION)
        for fut in (f_left, f_right):
            if fut in done and fut.exception() is not None:
                log.debug("%s: task failed, aborting join", name)
                raise fut.exception()  # type: ignore[misc]
        return f_left.result(), f_right.result()
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
