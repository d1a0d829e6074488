"""计数器业务逻辑。"""

import logging

from counter.models import Counter

logger = logging.getLogger(__name__)


class CounterService:
    @staticmethod
    def get_count() -> int:
        return Counter.objects.count()

    @staticmethod
    def increment() -> int:
        Counter.objects.create()
        return Counter.objects.count()

    @staticmethod
    def clear() -> int:
        deleted, _ = Counter.objects.all().delete()
        logger.info("清空计数器 deleted=%s", deleted)
        return Counter.objects.count()
