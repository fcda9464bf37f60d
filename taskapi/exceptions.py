"""任务服务自定义异常"""


class TaskApiError(Exception):
    """任务服务基础异常"""
    pass


class MalformedRequestError(TaskApiError):
    """请求体为空或不是合法的任务 JSON"""
    pass


class TaskValidationError(TaskApiError):
    """缺少必填字段（id / description）"""
    pass


class TaskNotFoundError(TaskApiError):
    """任务不存在"""

    def __init__(self, task_id: str):
        super().__init__(f"任务不存在: {task_id}")
        self.task_id = task_id


class SerializationError(TaskApiError):
    """任务序列化为 JSON 失败"""
    pass
