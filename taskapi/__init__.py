"""Task API - 内存任务存储的增删查服务"""

__version__ = "1.0.0"
