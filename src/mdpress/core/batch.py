"""Fail-slow fan-out/fan-in: run one task per item, join all, report every failure"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence, TypeVar

from mdpress.core.errors import BuildError
from mdpress.core.models import BatchResult


T = TypeVar("T")
R = TypeVar("R")


def run_all(
    func: Callable[[T], R],
    items: Sequence[T],
    max_workers: Optional[int] = None,
    ) -> BatchResult[R]:
    """Apply func to every item concurrently and aggregate in input order.

    A BuildError from one task never cancels its siblings. If any task failed,
    the result carries every error and no values. Other exceptions are bugs and
    propagate once all tasks have finished.
    """
    if not items:
        return BatchResult.success([])

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(func, item) for item in items]

    values: list[R] = []
    errors: list[BuildError] = []
    for future in futures:       # one slot per item, in input order
        try:
            values.append(future.result())
        except BuildError as e:
            errors.append(e)

    if errors:
        return BatchResult.failure(errors)
    return BatchResult.success(values)
