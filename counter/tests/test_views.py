import json

from django.test import TestCase
from django.urls import reverse

from counter.models import Counter


class CounterViewTests(TestCase):
    def _post(self, action):
        return self.client.post(
            reverse("counter:count"),
            data=json.dumps({"action": action}),
            content_type="application/json",
        )

    def test_get_count_starts_at_zero(self):
        response = self.client.get(reverse("counter:count"))

        self.assertEqual(response.json(), {"code": 0, "data": 0})

    def test_inc_and_clear(self):
        self._post("inc")
        response = self._post("inc")
        self.assertEqual(response.json()["data"], 2)
        self.assertEqual(Counter.objects.count(), 2)

        response = self._post("clear")
        self.assertEqual(response.json()["data"], 0)

    def test_unknown_action_returns_current_count(self):
        Counter.objects.create()

        response = self._post("noop")

        self.assertEqual(response.json()["data"], 1)

    def test_health(self):
        response = self.client.get(reverse("counter:health"))

        self.assertEqual(response.content.decode(), "I'm ok")
