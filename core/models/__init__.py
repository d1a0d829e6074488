from .questionnaire import Questionnaire
from .questionnaire_question import Question
from .questionnaire_option import Option
from . import choices

__all__ = [
    "Questionnaire",
    "Question",
    "Option",
    "choices",
]
