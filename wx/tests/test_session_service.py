from datetime import timedelta

from django.test import TestCase, override_settings
from django.utils import timezone

from core.exceptions import Unauthorized
from wx.models import WechatSession
from wx.services.session import WechatSessionService


class WechatSessionServiceTests(TestCase):
    def test_save_session_creates_row_with_expiry(self):
        before = timezone.now()
        session = WechatSessionService.save_session(
            openid="openid_1", session_key="key_1", expires_in=7200
        )

        self.assertEqual(WechatSession.objects.count(), 1)
        self.assertTrue(session.third_session)
        self.assertEqual(session.session_key, "key_1")
        self.assertGreaterEqual(session.expires_at, before + timedelta(seconds=7200))

    @override_settings(WX_SESSION_EXPIRES_IN=60)
    def test_save_session_uses_configured_lifetime(self):
        session = WechatSessionService.save_session(openid="openid_1", session_key="k")

        self.assertLessEqual(session.expires_at, timezone.now() + timedelta(seconds=60))

    def test_login_again_replaces_session_of_same_openid(self):
        first = WechatSessionService.save_session(openid="openid_1", session_key="old")
        second = WechatSessionService.save_session(openid="openid_1", session_key="new")

        self.assertEqual(WechatSession.objects.filter(openid="openid_1").count(), 1)
        self.assertNotEqual(first.third_session, second.third_session)
        self.assertEqual(
            WechatSessionService.validate_session(second.third_session).session_key, "new"
        )
        # 旧凭证随记录被覆盖，不再能查到
        with self.assertRaises(Unauthorized):
            WechatSessionService.validate_session(first.third_session)

    def test_validate_session_returns_openid_and_session_key(self):
        session = WechatSessionService.save_session(openid="openid_2", session_key="key_2")

        found = WechatSessionService.validate_session(session.third_session)

        self.assertEqual(found.openid, "openid_2")
        self.assertEqual(found.session_key, "key_2")

    def test_expired_session_is_unauthorized_even_though_row_exists(self):
        WechatSession.objects.create(
            third_session="expired-token",
            openid="openid_3",
            session_key="key_3",
            expires_at=timezone.now() - timedelta(minutes=1),
        )

        with self.assertRaises(Unauthorized):
            WechatSessionService.validate_session("expired-token")
        self.assertIsNotNone(WechatSessionService.get_session("expired-token"))

    def test_unknown_or_empty_token_is_unauthorized(self):
        with self.assertRaises(Unauthorized):
            WechatSessionService.validate_session("no-such-token")
        with self.assertRaises(Unauthorized):
            WechatSessionService.validate_session("")
