"""Off-loop execution of CPU-bound key derivation."""

from __future__ import annotations

import asyncio
import functools
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class KdfWorker:
    """Runs blocking callables on a thread pool and awaits them from asyncio.

    With no executor the running loop's default executor is used. A worker
    built with ``max_workers`` owns its pool and shuts it down on :meth:`close`.
    """

    def __init__(self, executor: Executor | None = None, *, max_workers: int | None = None):
        if executor is not None and max_workers is not None:
            raise ValueError("pass either executor or max_workers, not both")
        self._owned = executor is None and max_workers is not None
        if self._owned:
            executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="passhash")
        self._executor = executor
        self._closed = False

    async def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        if self._closed:
            raise RuntimeError("KdfWorker is closed")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, functools.partial(fn, *args, **kwargs))

    def close(self) -> None:
        self._closed = True
        if self._owned and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
