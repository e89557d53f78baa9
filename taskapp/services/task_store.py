# taskapp/services/task_store.py

import logging
import threading
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from ..errors import NotFoundError, ValidationError
from ..models.task import Priority, Task

logger = logging.getLogger(__name__)

SAMPLE_TASKS = [
    {
        "id": "1",
        "title": "Complete project proposal",
        "description": "Write up the detailed project proposal for the new client including timeline, budget, and resource allocation. Make sure to address all their requirements from the initial meeting.",
        "completed": False,
        "priority": "High",
    },
    {
        "id": "2",
        "title": "Weekly team meeting",
        "description": "Prepare agenda and notes for the weekly team sync-up. Topics include project status updates, roadblocks, and planning for next sprint.",
        "completed": False,
        "priority": "Medium",
    },
    {
        "id": "3",
        "title": "Buy groceries",
        "description": "Pick up milk, eggs, bread, fruits, and vegetables from the grocery store. Remember to use the discount coupon before it expires this weekend.",
        "completed": True,
        "priority": "Low",
    },
    {
        "id": "4",
        "title": "Schedule dentist appointment",
        "description": "Call Dr. Smiths office to schedule the annual checkup and cleaning. Their number is 555-1234. Best time to call is morning hours.",
        "completed": False,
        "priority": "Medium",
    },
]


class TaskStore:
    """
    In-memory, insertion-ordered task collection.

    Every operation holds the same lock, so mutations are serialized and
    readers never see a half-applied change. Returned tasks are copies.
    Ids come from a last-assigned counter and are never reused.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tasks: List[Task] = []
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _find(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [task.summary() for task in self._tasks]

    def get(self, task_id: str) -> Task:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                raise NotFoundError()
            return replace(task)

    def create(self, title, description="", priority=None, completed=False) -> Task:
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Task title is required")
        if not isinstance(description, str):
            description = "" if description is None else str(description)

        with self._lock:
            self._last_id += 1
            task = Task(
                id=str(self._last_id),
                title=title,
                description=description,
                completed=completed is True,
                priority=Priority.parse(priority),
            )
            self._tasks.append(task)
            logger.info(f"Created task {task.id}: {task.title}")
            return replace(task)

    def delete(self, task_id: str) -> None:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                raise NotFoundError()
            self._tasks.remove(task)
            logger.info(f"Deleted task {task_id}")

    def toggle(self, task_id: str) -> Task:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                raise NotFoundError()
            task.completed = not task.completed
            logger.debug(f"Task {task_id} completed={task.completed}")
            return replace(task)

    def seed(self, records: Iterable[Dict[str, Any]] = SAMPLE_TASKS) -> None:
        """Load records that already carry ids, e.g. the sample tasks."""
        # Build everything first so a bad record leaves the store untouched
        new_tasks = []
        for record in records:
            task_id = str(record["id"])
            if not task_id.isdigit():
                raise ValueError(f"Task id must be numeric: {task_id!r}")
            new_tasks.append(Task(
                id=task_id,
                title=record["title"],
                description=record.get("description", ""),
                completed=bool(record.get("completed", False)),
                priority=Priority.parse(record.get("priority")),
            ))

        with self._lock:
            seen = {task.id for task in self._tasks}
            for task in new_tasks:
                if task.id in seen:
                    raise ValueError(f"Duplicate task id: {task.id}")
                seen.add(task.id)
            last_id = max([self._last_id] + [int(task.id) for task in new_tasks])

            self._tasks = self._tasks + new_tasks
            self._last_id = last_id
            logger.info(f"Seeded task store, {len(self._tasks)} tasks")

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()
            self._last_id = 0
