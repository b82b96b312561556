"""
Bounded fan-out with a per-request deadline.

Work for independent candidates runs on a fixed-size thread pool. If the
deadline passes or the caller cancels, pending work is dropped, in-flight
work is abandoned, and Cancelled is raised. Partial results are never
returned.
"""

import logging
import threading
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Iterable, List, Optional, TypeVar

from .constants import CANCEL_POLL_INTERVAL_SECONDS
from .errors import Cancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class RequestContext:
    """Deadline and cancellation flag shared by everything one request runs."""

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.deadline = time.monotonic() + timeout_seconds if timeout_seconds is not None else None
        self.cancel_event = cancel_event or threading.Event()

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self) -> None:
        if self.cancelled:
            raise Cancelled("Request cancelled by caller")
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise Cancelled("Request deadline exceeded")


def fan_out(
    items: Iterable[T],
    fn: Callable[[T], R],
    *,
    max_workers: int,
    ctx: RequestContext,
) -> List[R]:
    """
    Apply fn to every item on a bounded pool.

    Args:
        items: Inputs, each processed independently
        fn: Worker function; must not mutate shared state
        max_workers: Upper bound on concurrent calls
        ctx: Request deadline/cancellation

    Returns:
        Results in the same order as items

    Raises:
        Cancelled: deadline passed or ctx cancelled before all work finished
        Exception: the first exception raised by any fn call
    """
    items = list(items)
    if not items:
        return []
    ctx.check()

    workers = max(1, min(max_workers, len(items)))
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="discovery")
    futures = [executor.submit(fn, item) for item in items]
    try:
        pending = set(futures)
        while pending:
            ctx.check()
            remaining = ctx.remaining()
            timeout = CANCEL_POLL_INTERVAL_SECONDS if remaining is None else min(CANCEL_POLL_INTERVAL_SECONDS, remaining)
            done, pending = wait(pending, timeout=timeout, return_when=FIRST_EXCEPTION)
            for fut in done:
                exc = fut.exception()
                if exc is not None:
                    raise exc
        return [fut.result() for fut in futures]
    except Cancelled:
        logger.warning(f"Fan-out abandoned with {sum(1 for f in futures if not f.done())} of {len(futures)} tasks unfinished")
        raise
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
