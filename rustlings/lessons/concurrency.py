"""Sharing state and data between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


@dataclass
class JobStatus:
    """How many jobs a worker has completed, guarded by a lock."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def _complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1

    def _completed(self) -> int:
        with self._lock:
            return self.jobs_completed


def run_jobs(total: int = 10, interval: float = 0.25, poll: float = 0.5) -> JobStatus:
    """Complete total jobs on a worker thread while this thread waits for them."""
    if total < 0:
        raise ValueError("the number of jobs cannot be negative")
    status = JobStatus()

    def work() -> None:
        for _ in range(total):
            time.sleep(interval)
            status._complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status._completed() < total:
        print("waiting... ")
        time.sleep(poll)
    worker.join()
    return status


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number, one thread per starting offset."""
    if workers <= 0:
        raise ValueError("at least one worker is needed")

    def sum_from(offset: int) -> int:
        total = sum(numbers[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))