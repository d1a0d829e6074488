from django.test import TestCase

from core.exceptions import Unauthorized
from users.models import CustomUser
from users.services import AuthService


class AuthServiceTests(TestCase):
    def setUp(self) -> None:
        self.service = AuthService()

    def test_get_or_create_wechat_user_creates_once(self):
        user, created = self.service.get_or_create_wechat_user("openid_a")
        again, created_again = self.service.get_or_create_wechat_user("openid_a")

        self.assertTrue(created)
        self.assertFalse(created_again)
        self.assertEqual(user.pk, again.pk)
        self.assertTrue(user.username.startswith("user_"))
        self.assertFalse(user.has_usable_password())

    def test_get_user_by_openid(self):
        user, _ = self.service.get_or_create_wechat_user("openid_b")

        self.assertEqual(self.service.get_user_by_openid("openid_b").pk, user.pk)

    def test_get_user_by_openid_rejects_unknown_or_inactive(self):
        CustomUser.objects.create_user(wx_openid="openid_inactive", is_active=False)

        with self.assertRaises(Unauthorized):
            self.service.get_user_by_openid("openid_missing")
        with self.assertRaises(Unauthorized):
            self.service.get_user_by_openid("openid_inactive")
