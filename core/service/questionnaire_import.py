"""问卷导入：将 JSON 描述的问卷一次性写入题库。"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, transaction

from core.models import Option, Question, Questionnaire, choices

logger = logging.getLogger(__name__)


def _to_decimal(value: Any, field: str) -> Decimal:
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"{field} 不是合法的数值：{value!r}") from exc
    if not number.is_finite():
        raise ValidationError(f"{field} 不是合法的数值：{value!r}")
    return number


def import_questionnaire(
    payload: Dict[str, Any], using: str = DEFAULT_DB_ALIAS
) -> Questionnaire:
    """
    【功能说明】
    - 按 payload 创建问卷、题目与选项，整体在一个事务内完成，任一环节出错全部回滚；
    - 未给出 sort_order 时按列表下标排序。

    【参数说明】
    :param payload: 问卷描述，格式示例：
           {
               "title": "焦虑自评",
               "version": "1.0.0",
               "is_published": true,
               "questions": [
                   {
                       "question_text": "最近两周是否感到紧张？",
                       "weight": "2.00",
                       "sub_type": "anxiety",
                       "options": [
                           {"option_text": "从不", "score": "0"},
                           {"option_text": "经常", "score": "3"}
                       ]
                   }
               ]
           }

    【异常说明】
    - 缺少标题、题目内容、选项内容或分值，或题目类型非法时抛出 ValidationError。
    """
    if not isinstance(payload, dict):
        raise ValidationError("问卷数据格式错误。")

    title = (payload.get("title") or "").strip()
    if not title:
        raise ValidationError("问卷标题不能为空。")

    questions_data = payload.get("questions") or []
    valid_types = set(choices.QuestionType.values)

    with transaction.atomic(using=using):
        questionnaire = Questionnaire.objects.using(using).create(
            title=title,
            description=payload.get("description"),
            version=payload.get("version") or "1.0.0",
            is_published=bool(payload.get("is_published", False)),
        )

        for q_index, q_data in enumerate(questions_data):
            question_text = (q_data.get("question_text") or "").strip()
            if not question_text:
                raise ValidationError(f"第 {q_index + 1} 题缺少题目内容。")

            question_type = q_data.get("question_type") or choices.QuestionType.SINGLE
            if question_type not in valid_types:
                raise ValidationError(f"第 {q_index + 1} 题类型非法：{question_type}")

            question = Question.objects.using(using).create(
                questionnaire=questionnaire,
                question_text=question_text,
                question_type=question_type,
                sort_order=q_data.get("sort_order", q_index),
                weight=_to_decimal(q_data.get("weight", "1.00"), "weight"),
                sub_type=q_data.get("sub_type") or None,
            )

            options = []
            for o_index, o_data in enumerate(q_data.get("options") or []):
                option_text = (o_data.get("option_text") or "").strip()
                if not option_text:
                    raise ValidationError(
                        f"第 {q_index + 1} 题第 {o_index + 1} 个选项缺少内容。"
                    )
                if o_data.get("score") is None:
                    raise ValidationError(
                        f"第 {q_index + 1} 题第 {o_index + 1} 个选项缺少分值。"
                    )
                options.append(
                    Option(
                        question=question,
                        option_text=option_text,
                        score=_to_decimal(o_data["score"], "score"),
                        is_correct=bool(o_data.get("is_correct", False)),
                        sort_order=o_data.get("sort_order", o_index),
                    )
                )
            Option.objects.using(using).bulk_create(options)

    logger.info(
        "导入问卷成功 questionnaire_id=%s title=%s questions=%s",
        questionnaire.id,
        questionnaire.title,
        len(questions_data),
    )
    return questionnaire
