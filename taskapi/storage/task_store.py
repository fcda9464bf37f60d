import threading
from typing import Dict, Optional
from ..models.task import Task


EXAMPLE_TASKS = [
    Task(
        id="1",
        description="Сделать финальное задание темы REST API",
        note="Если сегодня сделаю, то завтра будет свободный день. Ура!",
        applications=["VS Code", "Terminal", "git"],
    ),
    Task(
        id="2",
        description="Протестировать финальное задание с помощью Postmen",
        note="Лучше это делать в процессе разработки, каждый раз, когда запускаешь сервер и проверяешь хендлер",
        applications=["VS Code", "Terminal", "git", "Postman"],
    ),
]


class TaskStore:
    """内存任务存储，所有操作由同一把锁保护；读写均使用副本"""

    def __init__(self, seed: bool = True):
        self._store: Dict[str, Task] = {}
        self._lock = threading.Lock()
        if seed:
            self.seed()

    def seed(self) -> None:
        """写入示例任务（覆盖同 id 记录）"""
        with self._lock:
            for task in EXAMPLE_TASKS:
                self._store[task.id] = task.model_copy(deep=True)

    def put(self, task: Task) -> bool:
        """插入或覆盖，返回是否覆盖了已有任务"""
        with self._lock:
            replaced = task.id in self._store
            self._store[task.id] = task.model_copy(deep=True)
            return replaced

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self._store.get(task_id)
            return task.model_copy(deep=True) if task is not None else None

    def list(self) -> Dict[str, Task]:
        with self._lock:
            return {task_id: task.model_copy(deep=True) for task_id, task in self._store.items()}

    def delete(self, task_id: str) -> bool:
        with self._lock:
            if task_id in self._store:
                del self._store[task_id]
                return True
            return False

    def __contains__(self, task_id: str) -> bool:
        with self._lock:
            return task_id in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
