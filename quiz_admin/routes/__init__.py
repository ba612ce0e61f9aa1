"""API route modules."""
from quiz_admin.routes import content, questions, quizzes

__all__ = ["content", "questions", "quizzes"]
