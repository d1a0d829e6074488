"""问卷查询相关业务服务（只读）。"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.db import DEFAULT_DB_ALIAS

from core.models import Option, Questionnaire


class QuestionnaireService:
    """问卷读取服务封装，供小程序展示问卷使用。"""

    @staticmethod
    def get_questionnaire_base_info(
        questionnaire_id: int, using: str = DEFAULT_DB_ALIAS
    ) -> Optional[Dict[str, Any]]:
        """
        【功能说明】
        - 查询问卷的基础信息，不包含题目与选项。

        【返回参数说明】
        - {'id', 'title', 'description', 'version'}；问卷不存在时返回 None。
        """
        return (
            Questionnaire.objects.using(using)
            .filter(id=questionnaire_id)
            .values("id", "title", "description", "version")
            .first()
        )

    @staticmethod
    def get_questionnaire_with_questions(
        questionnaire_id: int, using: str = DEFAULT_DB_ALIAS
    ) -> List[Dict[str, Any]]:
        """
        【功能说明】
        - 以“题目 × 选项”的扁平行返回问卷内容，每个选项一行；
        - 没有任何选项的题目不会出现在结果中；
        - 按题目 sort_order、选项 sort_order 排序，相同排序号按 id 排。

        【返回参数说明】
        - 行结构：题目字段 + option_id / option_text / score，例如
          {'id': 3, 'questionnaire_id': 1, 'question_text': '最近两周是否感到紧张？',
           'question_type': 'single', 'sort_order': 1, 'weight': Decimal('2.00'),
           'sub_type': 'anxiety', 'option_id': 11, 'option_text': '经常',
           'score': Decimal('3.00')}
        """
        options = (
            Option.objects.using(using)
            .select_related("question")
            .filter(question__questionnaire_id=questionnaire_id)
            .order_by("question__sort_order", "question_id", "sort_order", "id")
        )

        rows = []
        for option in options:
            question = option.question
            rows.append(
                {
                    "id": question.id,
                    "questionnaire_id": question.questionnaire_id,
                    "question_text": question.question_text,
                    "question_type": question.question_type,
                    "sort_order": question.sort_order,
                    "weight": question.weight,
                    "sub_type": question.sub_type,
                    "option_id": option.id,
                    "option_text": option.option_text,
                    "score": option.score,
                }
            )
        return rows

    @staticmethod
    def group_questions(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        【功能说明】
        - 将 get_questionnaire_with_questions 返回的扁平行组装成“题目 -> 选项”嵌套结构；
        - 保持行的原有顺序。
        """
        grouped: Dict[int, Dict[str, Any]] = {}
        for row in rows:
            question = grouped.get(row["id"])
            if question is None:
                question = {
                    "id": row["id"],
                    "sub_type": row["sub_type"],
                    "question_text": row["question_text"],
                    "question_type": row["question_type"],
                    "sort_order": row["sort_order"],
                    "weight": row["weight"],
                    "options": [],
                }
                grouped[row["id"]] = question
            question["options"].append(
                {
                    "id": row["option_id"],
                    "option_text": row["option_text"],
                    "score": row["score"],
                }
            )
        return list(grouped.values())

    @staticmethod
    def get_questionnaire_detail(
        questionnaire_id: int, using: str = DEFAULT_DB_ALIAS
    ) -> Optional[Dict[str, Any]]:
        """获取问卷基础信息及嵌套的题目、选项；问卷不存在返回 None。"""
        base_info = QuestionnaireService.get_questionnaire_base_info(
            questionnaire_id, using=using
        )
        if base_info is None:
            return None

        rows = QuestionnaireService.get_questionnaire_with_questions(
            questionnaire_id, using=using
        )
        return {**base_info, "questions": QuestionnaireService.group_questions(rows)}
