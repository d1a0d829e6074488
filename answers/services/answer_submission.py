"""答案提交业务逻辑服务。"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Sequence

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction

from answers.models import UserAnswer
from answers.services.scoring import aggregate_scores, compute_obtained_score, total_score
from core.exceptions import InvalidReference, StorageError
from core.models import Option, Question

logger = logging.getLogger(__name__)

_score_field = UserAnswer._meta.get_field("obtained_score")
# decimal(5,2) 可存储的绝对值上限（不含）
_OBTAINED_SCORE_LIMIT = Decimal(10) ** (_score_field.max_digits - _score_field.decimal_places)


@dataclass
class SubmissionResult:
    """一次提交的结果：子量表得分汇总（含历史提交）与本次写入的答案条数。"""

    scores_by_subtype: Dict[str, Decimal] = field(default_factory=dict)
    answer_count: int = 0

    @property
    def total_score(self) -> Decimal:
        return total_score(self.scores_by_subtype)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores_by_subtype": dict(self.scores_by_subtype),
            "total_score": self.total_score,
            "answer_count": self.answer_count,
        }


def _to_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} 必须是正整数。")
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field_name} 必须是正整数。")
    return value


def _normalize_answers(answers: Any) -> List[Dict[str, int]]:
    if not isinstance(answers, (list, tuple)) or not answers:
        raise ValidationError("无效的答案数据")

    normalized = []
    for index, item in enumerate(answers):
        if not isinstance(item, Mapping):
            raise ValidationError(f"第 {index + 1} 个答案格式错误。")
        normalized.append(
            {
                "question_id": _to_positive_int(item.get("question_id"), "question_id"),
                "option_id": _to_positive_int(item.get("option_id"), "option_id"),
            }
        )
    return normalized


class AnswerSubmissionService:
    """处理答案提交：校验 -> 逐题计分落库 -> 汇总得分，整体在一个事务内完成。"""

    @classmethod
    def submit_answers(
        cls,
        user_id: int,
        questionnaire_id: int,
        answers: Sequence[Mapping[str, Any]],
        using: str = DEFAULT_DB_ALIAS,
    ) -> SubmissionResult:
        """
        提交一组答案，并返回该用户在此问卷下按子量表汇总的得分。

        【流程】
        1. 校验入参（在开启事务之前）：answers 非空，每项都带正整数 question_id / option_id；
        2. 开启事务，按输入顺序逐项解析选项与题目，任一不存在即抛出 InvalidReference；
        3. 计算 obtained_score = option.score × question.weight，写入一条 UserAnswer；
        4. 全部写入后，在同一事务内执行 aggregate_scores；
        5. 提交事务。步骤 2-4 任一失败都整体回滚，不会留下部分答案。

        【参数说明】
        :param user_id: 已通过会话认证的用户 ID
        :param questionnaire_id: 问卷 ID
        :param answers: [{"question_id": 1, "option_id": 3}, ...]
        :param using: 数据库别名，默认 default

        【异常说明】
        - ValidationError：入参格式错误，未开启事务；
        - InvalidReference：题目或选项不存在，事务已回滚；
        - StorageError：数据库异常（原始异常见 __cause__）或得分超出 decimal(5,2) 存储范围，事务已回滚。

        【说明】
        - 不做去重：重复提交同一题会追加新记录，汇总得分随之累加；
        - 选项与题目、题目与问卷的归属不一致时只记录告警，不拦截。

        【使用示例】
        >>> result = AnswerSubmissionService.submit_answers(
        ...     user_id=7,
        ...     questionnaire_id=1,
        ...     answers=[{"question_id": 1, "option_id": 3}],
        ... )
        >>> result.scores_by_subtype
        {'anxiety': Decimal('6.00')}
        """
        user_id = _to_positive_int(user_id, "user_id")
        questionnaire_id = _to_positive_int(questionnaire_id, "questionnaire_id")
        entries = _normalize_answers(answers)

        try:
            with transaction.atomic(using=using):
                for entry in entries:
                    cls._save_answer(user_id, questionnaire_id, entry, using)

                scores = aggregate_scores(user_id, questionnaire_id, using=using)
        except InvalidReference as exc:
            logger.warning(
                "答案提交失败，已回滚 user_id=%s questionnaire_id=%s: %s",
                user_id,
                questionnaire_id,
                exc,
            )
            raise
        except (DatabaseError, InvalidOperation) as exc:
            logger.exception(
                "答案提交数据库异常，已回滚 user_id=%s questionnaire_id=%s",
                user_id,
                questionnaire_id,
            )
            raise StorageError("答案保存失败") from exc

        logger.info(
            "答案提交成功 user_id=%s questionnaire_id=%s answer_count=%s",
            user_id,
            questionnaire_id,
            len(entries),
        )
        return SubmissionResult(scores_by_subtype=scores, answer_count=len(entries))

    @staticmethod
    def _save_answer(
        user_id: int, questionnaire_id: int, entry: Dict[str, int], using: str
    ) -> UserAnswer:
        option = Option.objects.using(using).filter(id=entry["option_id"]).first()
        if option is None:
            raise InvalidReference("option_id", entry["option_id"])

        question = (
            Question.objects.using(using)
            .select_related("questionnaire")
            .filter(id=entry["question_id"])
            .first()
        )
        if question is None:
            raise InvalidReference("question_id", entry["question_id"])

        if question.questionnaire_id != questionnaire_id:
            logger.warning(
                "题目 %s 属于问卷 %s，与提交的问卷 %s 不一致",
                question.id,
                question.questionnaire_id,
                questionnaire_id,
            )
        if option.question_id != question.id:
            logger.warning(
                "选项 %s 属于题目 %s，与提交的题目 %s 不一致",
                option.id,
                option.question_id,
                question.id,
            )

        obtained_score = compute_obtained_score(option, question)
        if abs(obtained_score) >= _OBTAINED_SCORE_LIMIT:
            logger.warning(
                "选项 %s × 题目 %s 的得分 %s 超出 obtained_score 字段精度",
                option.id,
                question.id,
                obtained_score,
            )
            raise StorageError(f"obtained_score={obtained_score} 超出存储范围")

        return UserAnswer.objects.using(using).create(
            user_id=user_id,
            questionnaire_id=questionnaire_id,
            question_id=question.id,
            option_id=option.id,
            obtained_score=obtained_score,
        )
