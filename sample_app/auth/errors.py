"""账号相关异常。登录失败不抛异常，统一返回 None。"""
from sample_app.auth.models import FieldError, ValidationResult


class AuthError(Exception):
    """账号模块异常基类。"""


class ValidationFailed(AuthError):
    """注册/更新字段未通过校验，尚未进行任何哈希计算。"""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__("; ".join(str(e) for e in result.errors) or "校验失败")

    @property
    def errors(self) -> list[FieldError]:
        return self.result.errors


class UserNotFound(AuthError):
    """按 ID 找不到用户（仅用于更新，登录不区分）。"""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"用户不存在: {user_id}")
