from .user_answer import UserAnswer

__all__ = ["UserAnswer"]
