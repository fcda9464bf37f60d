import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..config import Settings
from ..exceptions import SerializationError, TaskApiError, TaskNotFoundError
from ..services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["任务管理"])


def get_task_service(request: Request) -> TaskService:
    """从应用状态中取出任务服务"""
    return request.app.state.task_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _error_status(error: TaskApiError, operation: str, settings: Settings) -> int:
    """
    异常到 HTTP 状态码的映射

    默认保留原有行为：未找到返回 400；序列化失败时列表返回 500、单条返回 400。
    开启 semantic_status_codes 后未找到返回 404，序列化失败一律 500。
    """
    if isinstance(error, TaskNotFoundError):
        return 404 if settings.semantic_status_codes else 400
    if isinstance(error, SerializationError):
        if settings.semantic_status_codes or operation == "listTasks":
            return 500
        return 400
    return 400


def _reject(error: TaskApiError, operation: str, settings: Settings) -> HTTPException:
    status = _error_status(error, operation, settings)
    logger.warning(f"{operation}: {error} -> {status}")
    return HTTPException(status_code=status, detail=HTTPStatus(status).phrase)


@router.get("", summary="列出全部任务", description="返回以任务 ID 为键的全部任务")
@router.get("/", include_in_schema=False)
async def list_tasks(
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
):
    try:
        body = service.list_tasks()
    except TaskApiError as e:
        raise _reject(e, "listTasks", settings)

    return Response(content=body, status_code=200, media_type="application/json")


@router.post("", summary="创建任务", description="创建任务，同 ID 任务直接覆盖")
@router.post("/", include_in_schema=False)
async def create_task(
    request: Request,
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
):
    """
    创建任务

    - **id**: 任务ID（必填）
    - **description**: 任务描述（必填）
    - **note**: 备注（可选）
    - **applications**: 使用的应用列表（可选）
    """
    raw_body = await request.body()
    try:
        service.create_task(raw_body)
    except TaskApiError as e:
        raise _reject(e, "createTask", settings)

    return Response(status_code=201, media_type="application/json")


@router.get("/{task_id}", summary="查询任务", description="根据任务 ID 返回任务详情")
@router.get("/{task_id}/", include_in_schema=False)
async def get_task_by_id(
    task_id: str,
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
):
    try:
        body = service.get_task_by_id(task_id)
    except TaskApiError as e:
        raise _reject(e, "getTaskById", settings)

    return Response(content=body, status_code=200, media_type="application/json")


@router.delete("/{task_id}", summary="删除任务", description="根据任务 ID 删除任务")
@router.delete("/{task_id}/", include_in_schema=False)
async def delete_task_by_id(
    task_id: str,
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
):
    try:
        service.delete_task_by_id(task_id)
    except TaskApiError as e:
        raise _reject(e, "deleteTaskById", settings)

    return Response(status_code=200, media_type="application/json")
