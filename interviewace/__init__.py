"""
InterviewAce - Deterministic Interview Answer Evaluation and Recommendations

Scores practice interview answers with transparent heuristics and turns
a user's profile and history into adaptive, explainable recommendations.
"""

__version__ = "1.0.0"
__author__ = "InterviewAce Team"
