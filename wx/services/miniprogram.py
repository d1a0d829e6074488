"""小程序登录（jscode2session）与用户数据解密。"""

import logging
from typing import Any, Dict

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from wechatpy.crypto import WeChatWxaCrypto
from wechatpy.exceptions import InvalidAppIdException

logger = logging.getLogger(__name__)


class WechatAPIError(Exception):
    """微信接口返回了 errcode。"""

    def __init__(self, errcode: int, errmsg: str) -> None:
        self.errcode = errcode
        self.errmsg = errmsg
        super().__init__(f"{errcode}: {errmsg}")


class UserDataDecryptError(Exception):
    """用户加密数据无法用当前 session_key 解密。"""


def _get_credentials() -> tuple[str, str]:
    appid = settings.WX_APPID
    secret = settings.WX_SECRET
    if not appid or not secret:
        raise ImproperlyConfigured("微信配置参数缺失，请检查环境变量 WX_APPID / WX_SECRET")
    return appid, secret


def code_to_session(code: str) -> Dict[str, Any]:
    """
    【功能说明】
    - 用小程序 wx.login 得到的 code 调用微信 jscode2session，换取 openid 与 session_key；
    - 超时时间取 settings.WX_HTTP_TIMEOUT，不做自动重试，失败直接向上抛出。

    【返回值】
    - {'openid': ..., 'session_key': ..., 'unionid': ...(可选)}

    【异常说明】
    - 微信返回 errcode：WechatAPIError；
    - 网络异常：requests.RequestException；
    - 未配置 WX_APPID / WX_SECRET：ImproperlyConfigured。
    """
    appid, secret = _get_credentials()
    response = requests.get(
        settings.WX_LOGIN_URL,
        params={
            "appid": appid,
            "secret": secret,
            "js_code": code,
            "grant_type": "authorization_code",
        },
        timeout=settings.WX_HTTP_TIMEOUT,
    )
    response.raise_for_status()
    data = response.json()

    errcode = data.get("errcode")
    if errcode:
        logger.warning("[WX] jscode2session 失败 errcode=%s errmsg=%s", errcode, data.get("errmsg"))
        raise WechatAPIError(errcode, data.get("errmsg", ""))
    return data


def decrypt_user_data(session_key: str, encrypted_data: str, iv: str) -> Dict[str, Any]:
    """
    【功能说明】
    - 用登录时保存的 session_key 解密 wx.getUserInfo / 手机号等接口返回的 encryptedData；
    - 校验水印中的 appid 与当前小程序一致。

    【异常说明】
    - 解密失败或 appid 不匹配：UserDataDecryptError。
    """
    appid, _ = _get_credentials()
    try:
        crypto = WeChatWxaCrypto(session_key, iv, appid)
        return crypto.decrypt_message(encrypted_data)
    except InvalidAppIdException as exc:
        raise UserDataDecryptError("数据水印 appid 不匹配") from exc
    except (ValueError, TypeError, KeyError) as exc:
        raise UserDataDecryptError("用户数据解密失败") from exc
