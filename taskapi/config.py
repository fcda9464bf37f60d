"""应用配置（pydantic-settings）

所有配置项均可通过 TASKAPI_ 前缀的环境变量或 .env 文件覆盖，
默认值即可直接运行。
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """服务配置"""

    model_config = SettingsConfigDict(
        env_prefix="TASKAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Task API"
    version: str = "1.0.0"

    # 服务监听
    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=8080, description="监听端口")

    log_level: str = Field(default="DEBUG", description="日志级别")

    # 启动时写入两条示例任务
    seed_examples: bool = Field(default=True, description="是否预置示例任务")

    # False 时保留原有状态码：未找到返回 400，单条序列化失败返回 400
    semantic_status_codes: bool = Field(
        default=False,
        description="使用语义化状态码（未找到 404，序列化失败 500）",
    )

    cors_origins: List[str] = Field(default=["*"], description="CORS 允许的来源")


settings = Settings()
