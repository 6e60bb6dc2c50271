"""
Learning resource catalog for InterviewAce

Categorized by technical area so the recommendation engine can build
targeted learning paths. The catalog is injected into the engine; the
module constant is only the default.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from interviewace.models.profile import ExperienceLevel


class ResourceType(str, Enum):
    """Kinds of learning material."""

    ARTICLE = "article"
    VIDEO = "video"
    COURSE = "course"
    BOOK = "book"
    PRACTICE = "practice"


class ResourceDifficulty(str, Enum):
    """Declared difficulty of a resource."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Resource(BaseModel):
    """A single learning resource."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    url: str
    type: ResourceType
    difficulty: ResourceDifficulty
    duration: str = Field(..., description='Free text, e.g. "15 min", "2 hours"')
    tags: tuple[str, ...] = ()


class ResourceCategory(BaseModel):
    """A group of resources targeting one area."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    resources: tuple[Resource, ...]
    tags: tuple[str, ...] = ()


# ============================================================================
# DEFAULT CATALOG
# ============================================================================

LEARNING_RESOURCES: tuple[ResourceCategory, ...] = (
    ResourceCategory(
        id="algorithm-design",
        name="Algorithm Design",
        description="Master algorithmic thinking and problem-solving patterns",
        resources=(
            Resource(
                id="algo-1",
                title="Big O Notation Explained",
                description="Understanding time and space complexity analysis",
                url="https://www.khanacademy.org/computing/computer-science/algorithms/asymptotic-notation/a/big-o-notation",
                type=ResourceType.ARTICLE,
                difficulty=ResourceDifficulty.BEGINNER,
                duration="30 min",
                tags=("big-o", "complexity", "fundamentals"),
            ),
            Resource(
                id="algo-2",
                title="LeetCode Patterns Guide",
                description="Common algorithmic patterns for technical interviews",
                url="https://leetcode.com/discuss/general-discussion/458695/dynamic-programming-patterns",
                type=ResourceType.PRACTICE,
                difficulty=ResourceDifficulty.INTERMEDIATE,
                duration="2 hours",
                tags=("patterns", "dynamic-programming", "practice"),
            ),
            Resource(
                id="algo-3",
                title="Grokking Algorithms",
                description="Visual approach to understanding algorithms",
                url="https://www.manning.com/books/grokking-algorithms",
                type=ResourceType.BOOK,
                difficulty=ResourceDifficulty.BEGINNER,
                duration="8 hours",
                tags=("visual-learning", "comprehensive", "beginner-friendly"),
            ),
        ),
    ),
    ResourceCategory(
        id="system-architecture",
        name="System Architecture",
        description="Learn to design scalable and reliable systems",
        resources=(
            Resource(
                id="sys-1",
                title="System Design Primer",
                description="Comprehensive guide to system design concepts",
                url="https://github.com/donnemartin/system-design-primer",
                type=ResourceType.ARTICLE,
                difficulty=ResourceDifficulty.INTERMEDIATE,
                duration="4 hours",
                tags=("scalability", "distributed-systems", "architecture"),
            ),
            Resource(
                id="sys-2",
                title="Designing Data-Intensive Applications",
                description="Deep dive into modern data system architectures",
                url="https://dataintensive.net/",
                type=ResourceType.BOOK,
                difficulty=ResourceDifficulty.ADVANCED,
                duration="20 hours",
                tags=("databases", "distributed-systems", "advanced"),
            ),
            Resource(
                id="sys-3",
                title="High Scalability Blog",
                description="Real-world system architecture case studies",
                url="http://highscalability.com/",
                type=ResourceType.ARTICLE,
                difficulty=ResourceDifficulty.INTERMEDIATE,
                duration="1 hour",
                tags=("case-studies", "real-world", "scalability"),
            ),
        ),
    ),
    ResourceCategory(
        id="database-design",
        name="Database Design",
        description="Master database modeling and optimization",
        resources=(
            Resource(
                id="db-1",
                title="SQL vs NoSQL Explained",
                description="When to choose relational vs document databases",
                url="https://www.mongodb.com/nosql-explained/nosql-vs-sql",
                type=ResourceType.ARTICLE,
                difficulty=ResourceDifficulty.BEGINNER,
                duration="20 min",
                tags=("sql", "nosql", "fundamentals"),
            ),
            Resource(
                id="db-2",
                title="Database Indexing Strategies",
                description="Optimize query performance with proper indexing",
                url="https://use-the-index-luke.com/",
                type=ResourceType.COURSE,
                difficulty=ResourceDifficulty.INTERMEDIATE,
                duration="3 hours",
                tags=("performance", "indexing", "optimization"),
            ),
        ),
    ),
    ResourceCategory(
        id="communication-clarity",
        name="Communication Skills",
        description="Improve technical communication and interview presence",
        resources=(
            Resource(
                id="comm-1",
                title="Technical Communication Guide",
                description="How to explain complex concepts clearly",
                url="https://developers.google.com/tech-writing/one",
                type=ResourceType.COURSE,
                difficulty=ResourceDifficulty.BEGINNER,
                duration="1 hour",
                tags=("communication", "clarity", "presentation"),
            ),
            Resource(
                id="comm-2",
                title="Mock Interview Practice",
                description="Practice explaining code and thought process",
                url="https://www.pramp.com/",
                type=ResourceType.PRACTICE,
                difficulty=ResourceDifficulty.INTERMEDIATE,
                duration="45 min",
                tags=("mock-interviews", "practice", "feedback"),
            ),
        ),
    ),
    ResourceCategory(
        id="confidence-building",
        name="Interview Confidence",
        description="Build confidence and manage interview anxiety",
        resources=(
            Resource(
                id="conf-1",
                title="Interview Anxiety Management",
                description="Techniques to stay calm under pressure",
                url="https://www.indeed.com/career-advice/interviewing/how-to-calm-interview-nerves",
                type=ResourceType.ARTICLE,
                difficulty=ResourceDifficulty.BEGINNER,
                duration="15 min",
                tags=("anxiety", "confidence", "mental-preparation"),
            ),
            Resource(
                id="conf-2",
                title="Body Language in Interviews",
                description="Project confidence through non-verbal communication",
                url="https://www.ted.com/talks/amy_cuddy_your_body_language_may_shape_who_you_are",
                type=ResourceType.VIDEO,
                difficulty=ResourceDifficulty.BEGINNER,
                duration="21 min",
                tags=("body-language", "presence", "confidence"),
            ),
        ),
    ),
)


class ResourceCatalog:
    """Read-only lookups over a tuple of resource categories."""

    def __init__(self, categories: tuple[ResourceCategory, ...] = LEARNING_RESOURCES):
        self.categories = tuple(categories)

    def get_category(self, category_id: str) -> ResourceCategory | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def get_resources_for_weak_areas(self, weak_areas: list[str]) -> list[Resource]:
        """All resources of the named categories, in the order the areas were given."""
        resources: list[Resource] = []
        for area in weak_areas:
            category = self.get_category(area)
            if category:
                resources.extend(category.resources)
        return resources

    def get_resources_for_experience_level(self, level: ExperienceLevel) -> list[Resource]:
        """Beginner material for students and freshers, the rest for everyone else."""
        if level in (ExperienceLevel.STUDENT, ExperienceLevel.FRESHER):
            wanted = {ResourceDifficulty.BEGINNER}
        else:
            wanted = {ResourceDifficulty.INTERMEDIATE, ResourceDifficulty.ADVANCED}

        return [
            resource
            for category in self.categories
            for resource in category.resources
            if resource.difficulty in wanted
        ]


DEFAULT_RESOURCE_CATALOG = ResourceCatalog()
