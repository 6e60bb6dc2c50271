"""
Question models for InterviewAce

The question bank is supplied by collaborators; this module ships a
default bank and a deterministic selector over any bank.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from interviewace.models.evaluation import InterviewType


class Difficulty(str, Enum):
    """Question difficulty levels, easiest first."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionRole(str, Enum):
    """Roles the question bank is organized by."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    GENERAL = "general"


class Question(BaseModel):
    """A single interview question."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique question ID")
    category: InterviewType = Field(..., description="Question category")
    role: QuestionRole = Field(..., description="Role the question targets")
    difficulty: Difficulty = Field(..., description="Difficulty level")
    text: str = Field(..., description="The question text")


def _q(id: str, category: InterviewType, role: QuestionRole, difficulty: Difficulty, text: str) -> Question:
    return Question(id=id, category=category, role=role, difficulty=difficulty, text=text)


_T = InterviewType.TECHNICAL
_B = InterviewType.BEHAVIORAL
_S = InterviewType.SYSTEM_DESIGN
_H = InterviewType.HR


# ============================================================================
# DEFAULT QUESTION BANK
# ============================================================================

QUESTION_BANK: tuple[Question, ...] = (
    # Frontend
    _q("fe-easy-1", _T, QuestionRole.FRONTEND, Difficulty.EASY,
       "Can you explain the difference between var, let, and const in JavaScript?"),
    _q("fe-easy-2", _T, QuestionRole.FRONTEND, Difficulty.EASY,
       "What is the virtual DOM and how does it work in React?"),
    _q("fe-easy-3", _T, QuestionRole.FRONTEND, Difficulty.EASY,
       "How would you optimize the performance of a slow-loading web page?"),
    _q("fe-medium-1", _T, QuestionRole.FRONTEND, Difficulty.MEDIUM,
       "Explain the concept of closures in JavaScript. Can you provide a practical use case?"),
    _q("fe-medium-2", _T, QuestionRole.FRONTEND, Difficulty.MEDIUM,
       "How do you handle state management in a large React application? What libraries or patterns do you use?"),
    _q("fe-medium-3", _T, QuestionRole.FRONTEND, Difficulty.MEDIUM,
       "What are Web Workers and when would you use them? Can you describe a scenario?"),
    _q("fe-hard-1", _T, QuestionRole.FRONTEND, Difficulty.HARD,
       "Explain how the JavaScript event loop works. How does it handle async operations, promises, and microtasks?"),
    _q("fe-hard-2", _T, QuestionRole.FRONTEND, Difficulty.HARD,
       "Design a solution for implementing infinite scroll with virtualization for a list of 100,000 items."),
    # Backend
    _q("be-easy-1", _T, QuestionRole.BACKEND, Difficulty.EASY,
       "What is the difference between SQL and NoSQL databases? When would you use each?"),
    _q("be-easy-2", _T, QuestionRole.BACKEND, Difficulty.EASY,
       "Explain what RESTful APIs are. What are the main HTTP methods and their purposes?"),
    _q("be-easy-3", _T, QuestionRole.BACKEND, Difficulty.EASY,
       "How do you handle authentication and authorization in your applications?"),
    _q("be-medium-1", _T, QuestionRole.BACKEND, Difficulty.MEDIUM,
       "Explain database indexing. How does it improve performance and what are the trade-offs?"),
    _q("be-medium-2", _T, QuestionRole.BACKEND, Difficulty.MEDIUM,
       "How would you design a rate limiting system for an API?"),
    _q("be-medium-3", _T, QuestionRole.BACKEND, Difficulty.MEDIUM,
       "What strategies do you use for error handling and logging in production systems?"),
    _q("be-hard-1", _T, QuestionRole.BACKEND, Difficulty.HARD,
       "Design a distributed caching system that handles cache invalidation across multiple servers."),
    _q("be-hard-2", _T, QuestionRole.BACKEND, Difficulty.HARD,
       "Explain database transactions and ACID properties. How would you handle a distributed transaction?"),
    # Full stack
    _q("fs-easy-1", _T, QuestionRole.FULLSTACK, Difficulty.EASY,
       "Walk me through how a web request travels from the browser to the server and back."),
    _q("fs-easy-2", _T, QuestionRole.FULLSTACK, Difficulty.EASY,
       "What is CORS and why is it important? How do you handle it in your applications?"),
    _q("fs-easy-3", _T, QuestionRole.FULLSTACK, Difficulty.EASY,
       "Explain the difference between server-side rendering and client-side rendering."),
    _q("fs-medium-1", _T, QuestionRole.FULLSTACK, Difficulty.MEDIUM,
       "How would you implement real-time features in a web application (like live chat or notifications)?"),
    _q("fs-medium-2", _T, QuestionRole.FULLSTACK, Difficulty.MEDIUM,
       "Describe how you would architect a file upload system that handles large files efficiently."),
    _q("fs-medium-3", _T, QuestionRole.FULLSTACK, Difficulty.MEDIUM,
       "What security measures do you implement to protect against common web vulnerabilities?"),
    _q("fs-hard-1", _T, QuestionRole.FULLSTACK, Difficulty.HARD,
       "Design a system to handle 1 million concurrent users. What technologies and architecture would you use?"),
    _q("fs-hard-2", _T, QuestionRole.FULLSTACK, Difficulty.HARD,
       "Explain how you would implement end-to-end encryption for a messaging application."),
    # Behavioral
    _q("beh-1", _B, QuestionRole.GENERAL, Difficulty.MEDIUM,
       "Tell me about a time when you had to deal with a difficult team member. How did you handle it?"),
    _q("beh-2", _B, QuestionRole.GENERAL, Difficulty.MEDIUM,
       "Describe a challenging technical problem you solved. What was your approach?"),
    _q("beh-3", _B, QuestionRole.GENERAL, Difficulty.MEDIUM,
       "Tell me about a time when you had to learn a new technology quickly. How did you approach it?"),
    _q("beh-4", _B, QuestionRole.GENERAL, Difficulty.MEDIUM,
       "Describe a situation where you had to make a trade-off between perfect code and meeting a deadline."),
    _q("beh-5", _B, QuestionRole.GENERAL, Difficulty.MEDIUM,
       "Tell me about a project you're most proud of. What was your role and what made it successful?"),
    _q("beh-6", _B, QuestionRole.GENERAL, Difficulty.MEDIUM,
       "How do you handle code reviews? Can you describe a time when you received critical feedback?"),
    # System design
    _q("sys-1", _S, QuestionRole.GENERAL, Difficulty.HARD,
       "Design a URL shortening service like bit.ly. Consider scalability and analytics."),
    _q("sys-2", _S, QuestionRole.GENERAL, Difficulty.HARD,
       "How would you design a notification system that delivers notifications via email, SMS, and push?"),
    _q("sys-3", _S, QuestionRole.GENERAL, Difficulty.HARD,
       "Design a social media feed system. How would you rank and personalize content for users?"),
    _q("sys-4", _S, QuestionRole.GENERAL, Difficulty.HARD,
       "Design a video streaming service like YouTube. Focus on video storage and delivery."),
    # HR
    _q("hr-1", _H, QuestionRole.GENERAL, Difficulty.EASY,
       "Can you briefly introduce yourself and tell me about your background?"),
    _q("hr-2", _H, QuestionRole.GENERAL, Difficulty.EASY,
       "What interests you about this role? Why do you want to work here?"),
    _q("hr-3", _H, QuestionRole.GENERAL, Difficulty.EASY,
       "What are your career goals for the next 3-5 years?"),
    _q("hr-4", _H, QuestionRole.GENERAL, Difficulty.EASY,
       "What do you consider your greatest strength and weakness as a developer?"),
)

FALLBACK_QUESTION = Question(
    id="fallback-1",
    category=InterviewType.BEHAVIORAL,
    role=QuestionRole.GENERAL,
    difficulty=Difficulty.EASY,
    text="Tell me about yourself and your experience with software development.",
)


def select_question(
    role: str,
    interview_type: str,
    difficulty: str,
    used_questions: list[str] | None = None,
    bank: tuple[Question, ...] = QUESTION_BANK,
) -> Question:
    """
    Pick the next question deterministically.

    Candidates are tried in three passes, each keeping bank order:
    exact role/type/difficulty match, then difficulty only, then any
    unused question. Returns FALLBACK_QUESTION when the bank is exhausted.
    """
    used = set(used_questions or [])
    general = QuestionRole.GENERAL.value

    def role_matches(question: Question) -> bool:
        return question.role.value in (role, general) or role == general

    passes = (
        lambda q: role_matches(q) and q.category.value == interview_type and q.difficulty.value == difficulty,
        lambda q: q.difficulty.value == difficulty,
        lambda q: True,
    )

    for matches in passes:
        for question in bank:
            if question.id not in used and matches(question):
                return question

    return FALLBACK_QUESTION
