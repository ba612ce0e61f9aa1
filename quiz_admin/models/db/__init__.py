"""Database models."""
from quiz_admin.models.db.question import ComprehensionGroup, ContentJSON, Question

__all__ = [
    "ComprehensionGroup",
    "ContentJSON",
    "Question",
]
