"""users 服务层聚合入口。"""

from .auth import AuthService

__all__ = ["AuthService"]
