import json
import logging

from django.core.exceptions import ValidationError
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from answers.services import AnswerSubmissionService
from core.exceptions import InvalidReference, StorageError
from users.decorators import wechat_session_required

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
@wechat_session_required
def submit_answer(request: HttpRequest) -> JsonResponse:
    """
    API: 提交问卷答案
    POST /api/submit-answer
    Payload: {
        "questionnaire_id": 1,
        "answers": [{"question_id": 1, "option_id": 3}, ...]
    }
    返回: {"code": 0, "data": {"scores_by_subtype": {...}, "total_score": "6.00", "answer_count": 1}}
    """
    try:
        body = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({"code": 400, "message": "无效的 JSON 数据"}, status=400)

    if not isinstance(body, dict) or not body.get("questionnaire_id"):
        return JsonResponse({"code": 400, "message": "问卷ID缺失"}, status=400)

    try:
        result = AnswerSubmissionService.submit_answers(
            user_id=request.wx_user.id,
            questionnaire_id=body["questionnaire_id"],
            answers=body.get("answers"),
        )
    except ValidationError as e:
        return JsonResponse({"code": 400, "message": e.messages[0]}, status=400)
    except InvalidReference as e:
        return JsonResponse({"code": 500, "message": str(e)}, status=500)
    except StorageError:
        return JsonResponse({"code": 500, "message": "提交答案失败"}, status=500)
    except Exception:
        logger.exception("提交失败")
        return JsonResponse({"code": 500, "message": "提交答案失败"}, status=500)

    return JsonResponse({"code": 0, "data": result.to_dict()})
