"""密码加盐哈希与校验。

摘要 = SHA-256("{salt}--{password}") 的十六进制；盐 = SHA-256("{UTC 时间}--{password}")。
存储前由 UserStore 显式调用 prepare_for_storage，不依赖保存回调。
"""
import hashlib
import hmac
from datetime import datetime, timezone
from typing import Optional

from sample_app.auth.models import User
from sample_app.config import SALT_SEPARATOR


def secure_hash(text: str) -> str:
    # surrogatepass：命令行参数中的非法 UTF-8 字节会以孤立代理字符出现
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def encrypt(salt: str, plaintext: str) -> str:
    """用盐对明文密码求摘要。相同输入总是得到相同输出。"""
    return secure_hash(f"{salt}{SALT_SEPARATOR}{plaintext}")


def generate_salt(plaintext: str, now: Optional[datetime] = None) -> str:
    """以当前 UTC 时间与明文密码生成盐；now 仅供测试固定时间。"""
    t = now or datetime.now(timezone.utc)
    return secure_hash(f"{t.isoformat()}{SALT_SEPARATOR}{plaintext}")


def has_password(user: User, submitted: str) -> bool:
    """提交的密码是否与用户已存的摘要一致。尚无摘要时为 False。"""
    if not user.encrypted_password:
        return False
    return hmac.compare_digest(encrypt(user.salt, submitted), user.encrypted_password)


def is_new_credential(user: User, plaintext: str) -> bool:
    """
    没有摘要（首次保存），或摘要与该密码不符，即视为新凭据（需要新盐）。
    更新时若传入的仍是当前密码，则有意保留原盐，摘要也不变。
    """
    return not user.encrypted_password or not has_password(user, plaintext)


def prepare_for_storage(user: User, plaintext: str) -> User:
    """写入存储前计算盐与摘要；同一密码重复保存时盐与摘要保持不变。"""
    if is_new_credential(user, plaintext):
        user.salt = generate_salt(plaintext)
    user.encrypted_password = encrypt(user.salt, plaintext)
    return user
