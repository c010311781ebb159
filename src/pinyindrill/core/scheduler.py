"""
延遲任務排程

答對後會停頓一小段時間再切換到下一個字。這段停頓以 Scheduler 表示，
而不是直接依賴平台計時器：

- ManualScheduler: 以 advance() / run_all() 手動推進時間 (測試與終端機介面)
- ImmediateScheduler: 立即執行 (無停頓)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

Callback = Callable[[], None]


class ScheduledTask:
    """已排程的延遲任務，可在執行前取消"""

    def __init__(self, due: float, callback: Callback):
        self.due = due
        self._callback: Optional[Callback] = callback
        self._done = False

    @property
    def pending(self) -> bool:
        return not self._done

    @property
    def cancelled(self) -> bool:
        return self._done and self._callback is None

    def cancel(self) -> None:
        self._done = True
        self._callback = None

    def run(self) -> None:
        if self._done:
            return
        callback = self._callback
        self._done = True
        if callback is not None:
            callback()


class Scheduler(ABC):
    @abstractmethod
    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        pass


class ImmediateScheduler(Scheduler):
    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        task = ScheduledTask(0.0, callback)
        task.run()
        return task


class ManualScheduler(Scheduler):
    """
    可手動推進時間的排程器

    範例:
        >>> scheduler = ManualScheduler()
        >>> task = scheduler.schedule(0.8, lambda: print("next"))
        >>> scheduler.advance(0.5)   # 尚未到期
        0
        >>> scheduler.advance(0.5)
        next
        1
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._tasks: List[ScheduledTask] = []

    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        task = ScheduledTask(self.now + max(0.0, delay), callback)
        self._tasks.append(task)
        return task

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._tasks if task.pending)

    def advance(self, seconds: float) -> int:
        """推進時間並執行所有到期任務，回傳執行數量"""
        self.now += seconds
        return self._run_due()

    def run_all(self) -> int:
        """不論是否到期，依到期時間執行所有待執行任務"""
        pending = [task for task in self._tasks if task.pending]
        if pending:
            self.now = max(self.now, max(task.due for task in pending))
        return self._run_due()

    def _run_due(self) -> int:
        ran = 0
        due = sorted(
            (task for task in self._tasks if task.pending and task.due <= self.now),
            key=lambda task: task.due,
        )
        for task in due:
            if task.pending:
                task.run()
                ran += 1
        self._tasks = [task for task in self._tasks if task.pending]
        return ran
