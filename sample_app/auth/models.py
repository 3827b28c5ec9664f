"""用户、注册表单与校验结果数据模型。"""
from typing import List, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """用户（姓名 + 邮箱注册）。明文密码从不落盘。"""
    id: str = Field(..., description="用户唯一 ID")
    name: str = Field(..., description="姓名")
    email: str = Field(..., description="登录邮箱（按注册时原样保存）")
    salt: str = Field("", description="盐")
    encrypted_password: str = Field("", description="加盐后的密码摘要")
    created_at: Optional[str] = Field(None, description="创建时间 ISO")
    updated_at: Optional[str] = Field(None, description="更新时间 ISO")

    def public_dict(self) -> dict:
        """对外展示的字段（不含盐与摘要）。"""
        return self.model_dump(exclude={"salt", "encrypted_password"})


class Registration(BaseModel):
    """注册表单：姓名、邮箱、密码、确认密码。"""
    name: str = Field("", description="姓名")
    email: str = Field("", description="邮箱")
    password: str = Field("", description="明文密码（仅内存中使用）")
    password_confirmation: Optional[str] = Field(None, description="确认密码")


class FieldError(BaseModel):
    """单个字段的校验错误。"""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field} {self.message}"


class ValidationResult(BaseModel):
    """校验结果：错误列表为空即通过。"""
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field: str, message: str) -> None:
        self.errors.append(FieldError(field=field, message=message))

    def for_field(self, field: str) -> List[str]:
        """某字段的全部错误信息。"""
        return [e.message for e in self.errors if e.field == field]

    def fields(self) -> List[str]:
        """出错的字段（保持首次出现顺序）。"""
        out: List[str] = []
        for e in self.errors:
            if e.field not in out:
                out.append(e.field)
        return out
