import json
import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from counter.services import CounterService

logger = logging.getLogger(__name__)


@require_GET
def health(request: HttpRequest) -> HttpResponse:
    return HttpResponse("I'm ok")


@csrf_exempt
@require_http_methods(["GET", "POST"])
def count(request: HttpRequest) -> JsonResponse:
    """
    API: 计数器
    GET  /api/count                        -> 当前计数
    POST /api/count {"action": "inc"}      -> 计数 +1
    POST /api/count {"action": "clear"}    -> 清零
    """
    if request.method == "GET":
        return JsonResponse({"code": 0, "data": CounterService.get_count()})

    try:
        body = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({"code": 400, "message": "无效的 JSON 数据"}, status=400)

    action = body.get("action") if isinstance(body, dict) else None
    if action == "inc":
        result = CounterService.increment()
    elif action == "clear":
        result = CounterService.clear()
    else:
        result = CounterService.get_count()
    return JsonResponse({"code": 0, "data": result})
