"""注册字段校验：每个函数把字段错误追加到 ValidationResult，不抛异常。"""
from typing import Callable, Optional

from sample_app.auth.models import Registration, ValidationResult
from sample_app.config import (
    EMAIL_REGEX,
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)

BLANK = "不能为空"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_name(name: Optional[str], result: ValidationResult) -> None:
    if _is_blank(name):
        result.add("name", BLANK)
    elif len(name.strip()) > NAME_MAX_LENGTH:
        result.add("name", f"过长（最多 {NAME_MAX_LENGTH} 个字符）")


def validate_email(email: Optional[str], result: ValidationResult) -> None:
    if _is_blank(email):
        result.add("email", BLANK)
    elif not EMAIL_REGEX.fullmatch(email):
        result.add("email", "格式无效")


def validate_password(
    password: Optional[str],
    confirmation: Optional[str],
    result: ValidationResult,
) -> None:
    """密码：必填、须与确认密码一致、长度在 6~40 之间。"""
    if _is_blank(password):
        result.add("password", BLANK)
        return
    if confirmation != password:
        result.add("password_confirmation", "与密码不一致")
    if len(password) < PASSWORD_MIN_LENGTH:
        result.add("password", f"过短（至少 {PASSWORD_MIN_LENGTH} 个字符）")
    elif len(password) > PASSWORD_MAX_LENGTH:
        result.add("password", f"过长（最多 {PASSWORD_MAX_LENGTH} 个字符）")


def validate_registration(
    form: Registration,
    email_taken: Optional[Callable[[str], bool]] = None,
) -> ValidationResult:
    """
    校验整张注册表单。
    email_taken 由存储层提供，用于邮箱唯一性检查（不区分大小写）。
    """
    result = ValidationResult()
    validate_name(form.name, result)
    validate_email(form.email, result)
    if email_taken is not None and not result.for_field("email") and email_taken(form.email):
        result.add("email", "已被占用")
    validate_password(form.password, form.password_confirmation, result)
    return result
