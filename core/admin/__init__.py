"""
Admin registrations for core app.

Each model admin lives in its own module to avoid a single gigantic file.
"""

from .questionnaire import QuestionAdmin, QuestionnaireAdmin  # noqa: F401
