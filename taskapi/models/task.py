from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional


class Task(BaseModel):
    """任务模型

    id 与 description 在入库前由服务层校验非空；
    JSON 字段名不区分大小写，null 字符串（包括 applications 中的元素）按空字符串处理。
    """
    id: str = Field(default="", description="任务ID")
    description: str = Field(default="", description="任务描述")
    note: str = Field(default="", description="备注")
    applications: Optional[List[str]] = Field(None, description="使用的应用（保持顺序，不去重）")

    @model_validator(mode="before")
    @classmethod
    def _fold_field_names(cls, data):
        # 精确匹配优先，其次忽略大小写匹配；同一字段出现多次时后者生效
        if not isinstance(data, dict):
            return data
        names = {name.lower(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            if key not in cls.model_fields:
                key = names.get(key.lower(), key)
            folded[key] = value
        return folded

    @field_validator("id", "description", "note", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("applications", mode="before")
    @classmethod
    def _null_items_as_empty(cls, value):
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value

    def is_complete(self) -> bool:
        """id 与 description 均非空"""
        return bool(self.id) and bool(self.description)
