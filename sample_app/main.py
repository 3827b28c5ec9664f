"""命令行入口：register（注册）/ login（登录）/ show（查看用户）。"""
import argparse
import getpass
import sys
from pathlib import Path
from typing import List, Optional

from sample_app import __version__
from sample_app.auth.errors import ValidationFailed
from sample_app.auth.models import Registration
from sample_app.auth.store import UserStore
from sample_app.logger import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sample-app", description="用户注册与登录")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", type=Path, default=None, help="用户数据目录")
    sub = parser.add_subparsers(dest="command", required=True)

    reg = sub.add_parser("register", help="注册新用户")
    reg.add_argument("--name", required=True)
    reg.add_argument("--email", required=True)
    reg.add_argument("--password", help="省略时交互输入（含确认）")

    login = sub.add_parser("login", help="邮箱 + 密码登录")
    login.add_argument("--email", required=True)
    login.add_argument("--password", help="省略时交互输入")

    show = sub.add_parser("show", help="查看用户公开信息")
    show.add_argument("--email", required=True)
    return parser


def _register(store: UserStore, args: argparse.Namespace) -> int:
    if args.password is None:
        password = getpass.getpass("密码: ")
        confirmation = getpass.getpass("确认密码: ")
    else:
        password = confirmation = args.password
    form = Registration(
        name=args.name,
        email=args.email,
        password=password,
        password_confirmation=confirmation,
    )
    try:
        user = store.register(form)
    except ValidationFailed as e:
        print("注册失败：")
        for err in e.errors:
            print(f"  {err.field}: {err.message}")
        return 1
    print(user.id)
    return 0


def _login(store: UserStore, args: argparse.Namespace) -> int:
    password = args.password if args.password is not None else getpass.getpass("密码: ")
    user = store.authenticate(args.email, password)
    if user is None:
        print("邮箱或密码错误")
        return 1
    print(f"欢迎，{user.name}")
    return 0


def _show(store: UserStore, args: argparse.Namespace) -> int:
    user = store.find_by_email(args.email)
    if user is None:
        print("用户不存在")
        return 1
    for key, value in user.public_dict().items():
        print(f"{key}: {value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging()
    store = UserStore(base_dir=args.data_dir)
    if args.command == "register":
        return _register(store, args)
    if args.command == "login":
        return _login(store, args)
    return _show(store, args)


if __name__ == "__main__":
    sys.exit(main())
