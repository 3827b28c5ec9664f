"""用户账号：注册校验、加盐哈希、登录验证。"""
from sample_app.auth.errors import AuthError, UserNotFound, ValidationFailed
from sample_app.auth.models import FieldError, Registration, User, ValidationResult
from sample_app.auth.password import encrypt, generate_salt, has_password, prepare_for_storage
from sample_app.auth.store import UserStore
from sample_app.auth.validation import validate_registration

__all__ = [
    "AuthError",
    "UserNotFound",
    "ValidationFailed",
    "FieldError",
    "Registration",
    "User",
    "ValidationResult",
    "encrypt",
    "generate_salt",
    "has_password",
    "prepare_for_storage",
    "UserStore",
    "validate_registration",
]
