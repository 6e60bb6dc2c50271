"""
API endpoint modules for InterviewAce
"""

from interviewace.api.endpoints import analytics, evaluation, metadata, recommendation

__all__ = ["analytics", "evaluation", "metadata", "recommendation"]
