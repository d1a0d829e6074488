"""
答题计分引擎。

- compute_obtained_score：单题得分 = 选项分值 × 题目权重，保留两位小数；
- aggregate_scores：按子量表（Question.sub_type）汇总用户在某问卷下的得分。

全程使用 Decimal 计算，不经过 float，也不依赖数据库 SUM 的格式化结果。
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Mapping

from django.db import DEFAULT_DB_ALIAS

from answers.models import UserAnswer
from core.exceptions import NotFound
from core.models import Question

UNCLASSIFIED_SUB_TYPE = "未分类"

SCORE_QUANTUM = Decimal("0.01")


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_obtained_score(option, question) -> Decimal:
    """
    【功能说明】
    - 计算单个答案的得分：option.score × question.weight；
    - 结果按四舍五入保留两位小数，与 decimal(5,2) 字段精度一致，例如 3.50 × 2.00 -> 7.00。

    【参数说明】
    - option / question：具有 score / weight 属性的对象（模型实例或其他记录均可）。

    【异常说明】
    - option 或 question 为 None：抛出 NotFound。
    """
    if option is None:
        raise NotFound("选项不存在")
    if question is None:
        raise NotFound("题目不存在")

    score = _as_decimal(option.score) * _as_decimal(question.weight)
    return score.quantize(SCORE_QUANTUM, rounding=ROUND_HALF_UP)


def _sub_type_label(sub_type: str | None) -> str:
    if sub_type is None or not sub_type.strip():
        return UNCLASSIFIED_SUB_TYPE
    return sub_type


def aggregate_scores(
    user_id: int, questionnaire_id: int, using: str = DEFAULT_DB_ALIAS
) -> Dict[str, Decimal]:
    """
    【功能说明】
    - 读取用户在该问卷下的全部答题记录，按题目的 sub_type 分组累加 obtained_score；
    - sub_type 为空（或题目已被删除）的记录归入“未分类”，不会被丢弃；
    - 用户尚未作答时返回空字典。

    【返回参数说明】
    - {'anxiety': Decimal('6.00'), '未分类': Decimal('1.50')}

    【注意】
    - 只读无副作用；提交流程中需在写入答案的同一事务内调用，以读取一致的快照。
    """
    answers = list(
        UserAnswer.objects.using(using)
        .filter(user_id=user_id, questionnaire_id=questionnaire_id)
        .order_by("id")
        .values_list("question_id", "obtained_score")
    )
    if not answers:
        return {}

    question_ids = {question_id for question_id, _ in answers}
    sub_types = dict(
        Question.objects.using(using)
        .filter(id__in=question_ids)
        .values_list("id", "sub_type")
    )

    totals: Dict[str, Decimal] = {}
    for question_id, obtained_score in answers:
        label = _sub_type_label(sub_types.get(question_id))
        totals[label] = totals.get(label, Decimal("0.00")) + _as_decimal(obtained_score)

    return {label: value.quantize(SCORE_QUANTUM) for label, value in totals.items()}


def total_score(scores_by_subtype: Mapping[str, Decimal]) -> Decimal:
    """各子量表得分之和；没有得分时为 0.00。"""
    return sum(scores_by_subtype.values(), Decimal("0.00")).quantize(SCORE_QUANTUM)
