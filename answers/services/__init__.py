"""answers 服务层聚合入口。"""

from .answer_submission import AnswerSubmissionService, SubmissionResult
from .scoring import (
    UNCLASSIFIED_SUB_TYPE,
    aggregate_scores,
    compute_obtained_score,
    total_score,
)

__all__ = [
    "AnswerSubmissionService",
    "SubmissionResult",
    "UNCLASSIFIED_SUB_TYPE",
    "aggregate_scores",
    "compute_obtained_score",
    "total_score",
]
