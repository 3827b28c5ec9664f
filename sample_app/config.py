"""用户账号全局配置与路径。"""
import os
import re
from pathlib import Path

# 项目根目录（sample_app 包所在目录的上一级）
ROOT_DIR = Path(__file__).resolve().parent.parent
# 数据目录：可用环境变量 SAMPLE_APP_DATA_DIR 覆盖
DATA_DIR = Path(os.environ.get("SAMPLE_APP_DATA_DIR", "").strip() or ROOT_DIR / "data")
AUTH_DATA_DIR = DATA_DIR / "auth"  # 用户与登录

# 注册字段校验
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 40
EMAIL_REGEX = re.compile(r"[\w+\-.]+@[a-z\d\-.]+\.[a-z]+", re.IGNORECASE | re.ASCII)

# 盐与密码拼接时的分隔符
SALT_SEPARATOR = "--"

# 日志
LOG_LEVEL = os.environ.get("SAMPLE_APP_LOG_LEVEL", "INFO").strip().upper() or "INFO"
JSON_LOGS = os.environ.get("SAMPLE_APP_JSON_LOGS", "").strip().lower() in ("1", "true", "yes")


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    for d in (DATA_DIR, AUTH_DATA_DIR):
        d.mkdir(parents=True, exist_ok=True)
