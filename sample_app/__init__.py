"""用户账号示例应用。"""
__version__ = "0.1.0"
