"""请求访问日志中间件。"""

import logging
import time

logger = logging.getLogger("wxapp_backend.access")


class RequestLogMiddleware:
    """每个请求输出一行访问日志：METHOD path status length - ms。"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        length = response.get("Content-Length")
        if length is None and not getattr(response, "streaming", False):
            length = len(response.content)
        logger.info(
            "%s %s %s %s - %.3f ms",
            request.method,
            request.get_full_path(),
            response.status_code,
            length if length is not None else "-",
            elapsed_ms,
        )
        return response
