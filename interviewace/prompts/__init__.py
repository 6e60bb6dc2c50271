"""
AI prompt templates for InterviewAce

Contains structured prompts for:
- Conversational answer feedback
"""

from interviewace.prompts.feedback import FeedbackPrompts

__all__ = [
    "FeedbackPrompts",
]
