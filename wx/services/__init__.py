"""Wechat service package."""

from .miniprogram import (
    UserDataDecryptError,
    WechatAPIError,
    code_to_session,
    decrypt_user_data,
)
from .session import WechatSessionService

__all__ = [
    "UserDataDecryptError",
    "WechatAPIError",
    "WechatSessionService",
    "code_to_session",
    "decrypt_user_data",
]
