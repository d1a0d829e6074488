import json
from datetime import timedelta
from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from users.models import CustomUser
from wx.models import WechatSession
from wx.services.miniprogram import UserDataDecryptError


class DecryptUserDataViewTests(TestCase):
    def setUp(self) -> None:
        CustomUser.objects.create_user(wx_openid="openid_decrypt")
        WechatSession.objects.create(
            third_session="token-decrypt",
            openid="openid_decrypt",
            session_key="c2Vzc2lvbi1rZXk=",
            expires_at=timezone.now() + timedelta(hours=1),
        )
        self.url = reverse("wx:decrypt_user_data")

    def _post(self, payload):
        return self.client.post(
            self.url,
            data=json.dumps(payload),
            content_type="application/json",
            HTTP_AUTHORIZATION="Bearer token-decrypt",
        )

    @patch("wx.views.decrypt_user_data")
    def test_decrypts_with_stored_session_key(self, mock_decrypt):
        mock_decrypt.return_value = {
            "nickName": "小明",
            "watermark": {"appid": "wx_test_appid", "timestamp": 1},
        }

        response = self._post({"encryptedData": "ZGF0YQ==", "iv": "aXY="})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], {"nickName": "小明"})
        mock_decrypt.assert_called_once_with("c2Vzc2lvbi1rZXk=", "ZGF0YQ==", "aXY=")

    @patch("wx.views.decrypt_user_data", side_effect=UserDataDecryptError("用户数据解密失败"))
    def test_decrypt_failure_returns_400(self, mock_decrypt):
        response = self._post({"encryptedData": "ZGF0YQ==", "iv": "aXY="})

        self.assertEqual(response.status_code, 400)

    def test_missing_fields_returns_400(self):
        response = self._post({"iv": "aXY="})

        self.assertEqual(response.status_code, 400)

    def test_requires_session(self):
        response = self.client.post(
            self.url,
            data=json.dumps({"encryptedData": "x", "iv": "y"}),
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 401)
