"""用户注册与登录存储（本地 JSON）。"""
import json
import secrets
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from sample_app.auth.errors import UserNotFound, ValidationFailed
from sample_app.auth.models import Registration, User, ValidationResult
from sample_app.auth.password import has_password, prepare_for_storage
from sample_app.auth.validation import (
    validate_email,
    validate_name,
    validate_password,
    validate_registration,
)
from sample_app.config import AUTH_DATA_DIR, ensure_dirs
from sample_app.logger import get_logger

logger = get_logger(__name__)


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class UserStore:
    """用户存储：按邮箱（不区分大小写）索引，支持注册、更新与登录验证。"""
    _index_file = "users.json"

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or AUTH_DATA_DIR
        if base_dir is None:
            ensure_dirs()
        else:
            self.base_dir.mkdir(parents=True, exist_ok=True)

    def _index_path(self) -> Path:
        return self.base_dir / self._index_file

    def _user_path(self, user_id: str) -> Path:
        return self.base_dir / f"user_{user_id}.json"

    def _load_index(self) -> dict:
        if not self._index_path().exists():
            return {"by_email": {}, "ids": []}
        with open(self._index_path(), "r", encoding="utf-8") as f:
            return json.load(f)

    def _save_index(self, data: dict) -> None:
        with open(self._index_path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def list_ids(self) -> List[str]:
        """列出所有用户 ID。"""
        return list(self._load_index().get("ids", []))

    def get_user(self, user_id: str) -> Optional[User]:
        """按 user_id 获取用户。"""
        path = self._user_path(user_id)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return User.model_validate(json.load(f))

    def find_by_email(self, email: str) -> Optional[User]:
        """按邮箱查找用户（不区分大小写）。"""
        key = _normalize_email(email)
        if not key:
            return None
        user_id = self._load_index().get("by_email", {}).get(key)
        if not user_id:
            return None
        return self.get_user(user_id)

    def email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """邮箱是否已被其他用户占用。"""
        user_id = self._load_index().get("by_email", {}).get(_normalize_email(email))
        return user_id is not None and user_id != exclude_id

    def save(self, user: User) -> None:
        """保存用户记录并维护邮箱索引。调用方负责先校验与计算摘要。"""
        now = _now()
        if not user.created_at:
            user.created_at = now
        user.updated_at = now

        with open(self._user_path(user.id), "w", encoding="utf-8") as f:
            f.write(user.model_dump_json(indent=2))

        index = self._load_index()
        by_email = index.setdefault("by_email", {})
        for key in [k for k, v in by_email.items() if v == user.id]:
            del by_email[key]
        by_email[_normalize_email(user.email)] = user.id
        ids = index.setdefault("ids", [])
        if user.id not in ids:
            ids.append(user.id)
        self._save_index(index)

    def register(self, form: Registration) -> User:
        """注册新用户。字段不合法或邮箱已被占用时抛出 ValidationFailed。"""
        result = validate_registration(form, email_taken=self.email_taken)
        if not result.ok:
            logger.info("registration_rejected", fields=result.fields())
            raise ValidationFailed(result)
        user = User(
            id=secrets.token_hex(8),
            name=form.name.strip(),
            email=form.email.strip(),
        )
        prepare_for_storage(user, form.password)
        self.save(user)
        logger.info("user_registered", user_id=user.id)
        return user

    def update(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        password_confirmation: Optional[str] = None,
    ) -> User:
        """更新资料；只校验传入的字段，仅在传入新密码时重新计算盐与摘要。"""
        user = self.get_user(user_id)
        if user is None:
            raise UserNotFound(user_id)

        result = ValidationResult()
        if name is not None:
            validate_name(name, result)
        if email is not None:
            validate_email(email, result)
            if not result.for_field("email") and self.email_taken(email, exclude_id=user_id):
                result.add("email", "已被占用")
        if password is not None:
            validate_password(password, password_confirmation, result)
        if not result.ok:
            logger.info("update_rejected", user_id=user_id, fields=result.fields())
            raise ValidationFailed(result)

        if name is not None:
            user.name = name.strip()
        if email is not None:
            user.email = email.strip()
        if password is not None:
            prepare_for_storage(user, password)
        self.save(user)
        logger.info("user_updated", user_id=user_id, password_changed=password is not None)
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """登录：邮箱不存在与密码错误一律返回 None，调用方无法区分。"""
        user = self.find_by_email(email)
        if user is not None and has_password(user, password):
            return user
        logger.info("authentication_failed")
        return None

    def delete(self, user_id: str) -> bool:
        """删除用户并移出索引。"""
        path = self._user_path(user_id)
        if not path.exists():
            return False
        path.unlink()
        index = self._load_index()
        by_email = index.get("by_email", {})
        for key in [k for k, v in by_email.items() if v == user_id]:
            del by_email[key]
        if user_id in index.get("ids", []):
            index["ids"].remove(user_id)
        self._save_index(index)
        return True
