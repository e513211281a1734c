"""Threaded dining philosophers simulation with a death monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from dining.args import Args

_FORK_POLL_SECONDS = 0.01
_MONITOR_PAUSE_SECONDS = 0.0005


def now_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep for at least ms milliseconds in small steps."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(0.0001)


@dataclass(eq=False)
class Philosopher:
    """One diner sharing a fork with each neighbour."""

    id: int
    simulation: Simulation
    left_fork: threading.Lock
    right_fork: threading.Lock
    meals_eaten: int = 0
    last_meal: int = 0
    is_eating: bool = field(default=False)

    def _take(self, fork: threading.Lock) -> bool:
        while not fork.acquire(timeout=_FORK_POLL_SECONDS):
            if self.simulation.finished:
                return False
        return True

    def think(self) -> None:
        self.simulation.print_status(self, "is thinking")

    def eat(self) -> bool:
        """Take both forks and eat; False if the simulation ended while waiting."""
        sim = self.simulation
        if not self._take(self.left_fork):
            return False
        try:
            sim.print_status(self, "has taken a fork")
            if not self._take(self.right_fork):
                return False
            try:
                sim.print_status(self, "has taken a fork")
                with sim.meal_lock:
                    self.is_eating = True
                    self.last_meal = now_ms()
                sim.print_status(self, "is eating")
                precise_sleep(sim.args.time_to_eat)
                self.meals_eaten += 1
                with sim.meal_lock:
                    self.is_eating = False
            finally:
                self.right_fork.release()
        finally:
            self.left_fork.release()
        return True

    def sleep(self) -> None:
        self.simulation.print_status(self, "is sleeping")
        precise_sleep(self.simulation.args.time_to_sleep)

    def routine(self) -> None:
        """Think, eat and sleep until someone dies or enough meals are eaten."""
        sim = self.simulation
        if self.id % 2 == 0:
            time.sleep(0.001)
        while True:
            with sim.meal_lock:
                if sim.someone_died:
                    break
            self.think()
            if not self.eat():
                break
            must_eat = sim.args.must_eat
            if must_eat is not None and self.meals_eaten >= must_eat:
                with sim.all_ate_lock:
                    sim.all_ate += 1
                break
            self.sleep()


class Simulation:
    """Shared table state: forks, philosophers and the status log."""

    def __init__(self, args: Args, out: TextIO | None = None) -> None:
        self.args = args
        self.out = out if out is not None else sys.stdout
        self.start_time = 0
        self.someone_died = False
        self.all_ate = 0
        self.print_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.all_ate_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(args.n_philos)]
        self.philosophers = [
            Philosopher(
                id=i + 1,
                simulation=self,
                left_fork=self.forks[i],
                right_fork=self.forks[(i + 1) % args.n_philos],
            )
            for i in range(args.n_philos)
        ]

    @property
    def finished(self) -> bool:
        return self.someone_died

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Log a status line unless the simulation has already ended."""
        timestamp = now_ms() - self.start_time
        with self.print_lock:
            if not self.someone_died:
                self._write(f"{timestamp} {philosopher.id} {status}")

    def monitor(self) -> None:
        """Watch for starvation and for every philosopher having eaten enough."""
        while True:
            for philosopher in self.philosophers:
                with self.meal_lock:
                    now = now_ms()
                    starved = now - philosopher.last_meal >= self.args.time_to_die
                    if starved:
                        self.someone_died = True
                if starved:
                    with self.print_lock:
                        self._write(f"{now - self.start_time} {philosopher.id} died")
                    return
            if self.args.must_eat is not None:
                with self.all_ate_lock:
                    if self.all_ate >= self.args.n_philos:
                        self.someone_died = True
                        return
            time.sleep(_MONITOR_PAUSE_SECONDS)

    def run(self) -> None:
        """Run the simulation to its end."""
        self.start_time = now_ms()
        threads = []
        for philosopher in self.philosophers:
            philosopher.last_meal = self.start_time
            thread = threading.Thread(
                target=philosopher.routine, name=f"philosopher-{philosopher.id}"
            )
            thread.start()
            threads.append(thread)
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        watcher.join()
        for thread in threads:
            thread.join()