"""Concurrency lesson: sharing data between threads and tracking job progress."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def offset_sums(numbers: Iterable[int], workers: int) -> list[int]:
    """Sum every workers-th number from each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    shared = tuple(numbers)

    def sum_from(offset: int) -> int:
        return sum(shared[offset::workers])

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


@dataclass
class JobStatus:
    """A counter of completed jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def run_jobs(count: int, delay: float) -> JobStatus:
    """Complete count jobs on a worker thread while waiting for them here."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    status = JobStatus()

    def work() -> None:
        for _ in range(count):
            time.sleep(delay)
            status.complete_one()

    worker = threading.Thread(target=work)
    worker.start()
    while status.jobs_completed < count:
        print("waiting... ")
        time.sleep(delay * 2)
    worker.join()
    return status