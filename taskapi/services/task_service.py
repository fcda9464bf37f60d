import logging
from typing import Dict

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..exceptions import (
    MalformedRequestError,
    SerializationError,
    TaskNotFoundError,
    TaskValidationError,
)
from ..models.task import Task
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)

_task_map_adapter = TypeAdapter(Dict[str, Task])


class TaskService:
    """任务增删查业务逻辑，存储由调用方注入"""

    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self) -> bytes:
        """返回全部任务的 JSON（以 id 为键）"""
        try:
            return _task_map_adapter.dump_json(self.store.list())
        except PydanticSerializationError as e:
            raise SerializationError(f"任务列表序列化失败: {e}") from e

    def create_task(self, raw_body: bytes) -> Task:
        """
        根据请求体创建任务

        Args:
            raw_body: 原始请求体，应为单个任务 JSON 对象

        Returns:
            Task: 已保存的任务

        Raises:
            MalformedRequestError: 请求体为空或 JSON 非法
            TaskValidationError: id 或 description 为空
        """
        if not raw_body or not raw_body.strip():
            raise MalformedRequestError("请求体为空")

        # 非法 UTF-8 字节替换为 U+FFFD，而不是拒绝请求
        text = raw_body.decode("utf-8", errors="replace")
        try:
            task = Task.model_validate_json(text)
        except ValidationError as e:
            raise MalformedRequestError(f"无法解析任务 JSON: {e.error_count()} 处错误") from e

        if not task.is_complete():
            raise TaskValidationError("id 和 description 为必填项")

        # 同 id 直接覆盖，属于业务规则而非错误
        if self.store.put(task):
            logger.info(f"同 id 任务已存在，已覆盖: {task.id}")
        logger.debug(f"任务已创建: {task!r}")
        return task

    def get_task_by_id(self, task_id: str) -> bytes:
        """返回单个任务的 JSON"""
        task = self.store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        try:
            return task.model_dump_json().encode("utf-8")
        except PydanticSerializationError as e:
            raise SerializationError(f"任务序列化失败: {task_id}") from e

    def delete_task_by_id(self, task_id: str) -> None:
        if not self.store.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.debug(f"任务已删除: {task_id}")
