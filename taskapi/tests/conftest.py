import pytest
from fastapi.testclient import TestClient

from taskapi.config import Settings
from taskapi.main import create_app
from taskapi.services.task_service import TaskService
from taskapi.storage.task_store import TaskStore


@pytest.fixture
def store():
    """预置示例任务的新存储"""
    return TaskStore()


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def client(store):
    """默认配置（保留原有状态码）的测试客户端"""
    app = create_app(settings=Settings(_env_file=None, semantic_status_codes=False), store=store)
    return TestClient(app)


@pytest.fixture
def semantic_client():
    """开启语义化状态码的测试客户端"""
    app = create_app(settings=Settings(_env_file=None, semantic_status_codes=True), store=TaskStore())
    return TestClient(app)
