"""
【业务说明】问卷与登录链路共用的业务异常。
【用法】Service 层抛出，View 层捕获后转换为对应的 HTTP 状态码：
        - ValidationError（沿用 Django 自带）：400，事务尚未开启；
        - InvalidReference：500，题目或选项不存在，事务整体回滚；
        - Unauthorized：401，会话缺失或过期；
        - StorageError：500，事务中的数据库异常，事务整体回滚。
"""

from django.core.exceptions import ValidationError

__all__ = [
    "ValidationError",
    "NotFound",
    "InvalidReference",
    "Unauthorized",
    "StorageError",
]


class NotFound(Exception):
    """引用的记录不存在。"""


class InvalidReference(NotFound):
    """提交的 question_id / option_id 无法解析到数据库中的记录。"""

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}={value} 不存在")


class Unauthorized(Exception):
    """会话凭证缺失、无效或已过期。"""


class StorageError(Exception):
    """事务执行期间的数据库异常（原始异常通过 __cause__ 保留），或得分超出存储精度。"""
