"""Threads: waiting for workers, sharing a counter and sending over a channel."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Callable


def run_workers(count: int = 10, delay: float = 0.25) -> int:
    """Start workers that sleep and report; wait for all and return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()
    completed = 0
    for handle in handles:
        handle.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    jobs_completed: int = 0


def count_jobs(count: int = 10, delay: float = 2.5) -> JobStatus:
    """Have workers each record one completed job in a shared status."""
    status = JobStatus()
    lock = threading.Lock()

    def work() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(
    queue: Queue, sink: Callable[[int], object], delay: float = 1.0
) -> list[threading.Thread]:
    """Send each half of the queue to the sink from its own thread; return the threads."""

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            sink(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(list(half),), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive every value sent from the queue, in arrival order."""
    channel: "queue_module.Queue[int]" = queue_module.Queue()
    senders = send_tx(queue, channel.put, delay)
    received: list[int] = []
    while True:
        try:
            value = channel.get(timeout=0.05)
        except queue_module.Empty:
            if any(sender.is_alive() for sender in senders):
                continue
            while True:
                try:
                    value = channel.get_nowait()
                except queue_module.Empty:
                    break
                print(f"Got: {value}")
                received.append(value)
            break
        print(f"Got: {value}")
        received.append(value)
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} values but the queue holds {queue.length}"
        )
    return received


queue_module = queue