"""问卷展示接口。"""

import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from core.service.questionnaire import QuestionnaireService

logger = logging.getLogger(__name__)


@require_GET
def questionnaire_detail(request: HttpRequest, questionnaire_id: int) -> JsonResponse:
    """
    API: 获取问卷及其题目、选项
    GET /api/questionnaire/<id>
    """
    try:
        data = QuestionnaireService.get_questionnaire_detail(questionnaire_id)
    except Exception:
        logger.exception("获取问卷失败 questionnaire_id=%s", questionnaire_id)
        return JsonResponse({"code": 500, "message": "服务器内部错误"}, status=500)

    if data is None:
        return JsonResponse({"code": 404, "message": "问卷不存在"}, status=404)
    return JsonResponse({"code": 0, "data": data})
