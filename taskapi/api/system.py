from fastapi import APIRouter, Request

router = APIRouter(tags=["系统"])


@router.get("/", summary="服务信息")
async def root(request: Request):
    """获取 API 服务信息"""
    settings = request.app.state.settings
    return {"message": f"{settings.app_name} is running", "version": settings.version}


@router.get("/health", summary="健康检查")
async def health():
    """检查服务健康状态"""
    return {"status": "healthy"}
