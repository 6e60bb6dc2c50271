"""
Domain keyword library for InterviewAce

Static per-role keyword sets used to measure technical depth.
The lists are versioned configuration data: the engine receives a
KeywordLibrary instance rather than reading the module constant directly.
"""

from types import MappingProxyType
from typing import Mapping

from interviewace.models.evaluation import InterviewType


KEYWORD_LIBRARY_VERSION = "1.0.0"

GENERAL_ROLE = "general"

# Number of general keywords mixed into technical interviews
TECHNICAL_GENERAL_KEYWORDS = 10


# ============================================================================
# KEYWORDS BY ROLE
# ============================================================================

FRONTEND_KEYWORDS: tuple[str, ...] = (
    # Core technologies
    "react", "vue", "angular", "svelte", "nextjs", "typescript", "javascript",
    # State management
    "redux", "context", "zustand", "recoil", "state", "props",
    # React concepts
    "hooks", "useeffect", "usestate", "usememo", "usecallback", "useref",
    "lifecycle", "component", "jsx", "virtual dom", "reconciliation",
    # Performance
    "optimization", "memo", "lazy loading", "code splitting", "bundle",
    "performance", "lighthouse", "core web vitals", "ssr", "csr",
    # Styling
    "css", "tailwind", "styled-components", "sass", "flexbox", "grid",
    # Tooling
    "webpack", "vite", "babel", "eslint", "prettier",
    # Testing
    "jest", "testing library", "cypress", "playwright", "unit test",
    # Accessibility
    "accessibility", "aria", "semantic html", "wcag",
)

BACKEND_KEYWORDS: tuple[str, ...] = (
    # Languages & frameworks
    "nodejs", "express", "fastify", "nestjs", "python", "django", "flask",
    "java", "spring", "golang", "rust",
    # Databases
    "postgresql", "mysql", "mongodb", "redis", "database", "sql", "nosql",
    "orm", "prisma", "sequelize", "mongoose", "query", "migration",
    # API design
    "rest", "graphql", "api", "endpoint", "route", "middleware",
    "authentication", "authorization", "jwt", "oauth", "cors",
    # Architecture
    "microservices", "monolith", "architecture", "design pattern",
    "mvc", "repository", "service layer", "dependency injection",
    # Performance
    "caching", "indexing", "optimization", "scaling", "load balancing",
    "throughput", "latency", "concurrency", "async", "queue",
    # Security
    "security", "encryption", "hashing", "validation", "sanitization",
    "sql injection", "xss", "csrf",
    # Operations
    "docker", "kubernetes", "ci/cd", "deployment", "monitoring",
    "logging", "error handling",
)

FULLSTACK_KEYWORDS: tuple[str, ...] = (
    # Frontend
    "react", "nextjs", "typescript", "hooks", "component", "state",
    # Backend
    "nodejs", "express", "api", "database", "mongodb", "postgresql",
    # Full-stack concepts
    "fullstack", "end-to-end", "client-server", "spa", "ssr",
    "authentication", "authorization", "session", "cookie",
    # Operations
    "deployment", "docker", "ci/cd", "git", "version control",
    # Architecture
    "architecture", "design", "scalability", "performance",
    "rest", "graphql", "websocket",
)

DATA_SCIENCE_KEYWORDS: tuple[str, ...] = (
    # Languages & tools
    "python", "pandas", "numpy", "scikit-learn", "tensorflow", "pytorch",
    "jupyter", "matplotlib", "seaborn", "plotly",
    # Concepts
    "machine learning", "deep learning", "neural network", "model",
    "algorithm", "regression", "classification", "clustering",
    "supervised", "unsupervised", "reinforcement",
    # Statistics
    "statistics", "probability", "hypothesis", "correlation",
    "distribution", "variance", "standard deviation",
    # Data processing
    "data cleaning", "feature engineering", "preprocessing",
    "normalization", "encoding", "pipeline",
    # Evaluation
    "accuracy", "precision", "recall", "f1 score", "cross validation",
    "overfitting", "underfitting", "bias", "variance",
)

DEVOPS_KEYWORDS: tuple[str, ...] = (
    # Containers & orchestration
    "docker", "kubernetes", "container", "pod", "deployment",
    "helm", "service mesh", "istio",
    # CI/CD
    "ci/cd", "jenkins", "github actions", "gitlab", "pipeline",
    "continuous integration", "continuous deployment",
    # Cloud
    "aws", "azure", "gcp", "cloud", "ec2", "s3", "lambda",
    "kubernetes", "terraform", "cloudformation",
    # Monitoring
    "monitoring", "prometheus", "grafana", "elk", "logging",
    "metrics", "alerting", "observability",
    # Automation
    "automation", "scripting", "ansible", "puppet", "chef",
    "infrastructure as code", "iac",
    # Security
    "security", "secrets management", "vault", "ssl", "tls",
)

GENERAL_KEYWORDS: tuple[str, ...] = (
    # Software engineering
    "software", "engineering", "development", "programming",
    "algorithm", "data structure", "complexity", "optimization",
    # Best practices
    "design pattern", "solid", "dry", "kiss", "clean code",
    "refactoring", "testing", "debugging", "documentation",
    # Collaboration
    "git", "version control", "code review", "agile", "scrum",
    "collaboration", "communication", "team", "project",
    # Problem solving
    "problem solving", "analysis", "solution", "approach",
    "implementation", "troubleshooting", "debugging",
)


DOMAIN_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "frontend": FRONTEND_KEYWORDS,
    "backend": BACKEND_KEYWORDS,
    "fullstack": FULLSTACK_KEYWORDS,
    "data-science": DATA_SCIENCE_KEYWORDS,
    "devops": DEVOPS_KEYWORDS,
    GENERAL_ROLE: GENERAL_KEYWORDS,
})


class KeywordLibrary:
    """
    Lookup over a role -> keywords table.

    Instances are read-only; pass a custom table to localize or tune
    technical-depth scoring without touching the scorers.
    """

    def __init__(
        self,
        keywords: Mapping[str, tuple[str, ...]] | None = None,
        version: str = KEYWORD_LIBRARY_VERSION,
    ):
        source = DOMAIN_KEYWORDS if keywords is None else keywords
        self._keywords: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {role.lower(): tuple(terms) for role, terms in source.items()}
        )
        self.version = version

    @property
    def roles(self) -> list[str]:
        return list(self._keywords)

    def for_role(self, role: str) -> tuple[str, ...]:
        """Keywords for a role; unknown roles have none."""
        return self._keywords.get(role.lower(), ())

    def get_relevant_keywords(self, role: str, interview_type: str) -> list[str]:
        """
        Get relevant keywords based on role and interview type.

        - technical: role keywords plus the first ten general keywords
        - behavioral: general keywords only
        - system-design and anything else: role keywords plus all general keywords
        """
        role_keywords = list(self.for_role(role))
        general_keywords = list(self.for_role(GENERAL_ROLE))

        if interview_type == InterviewType.TECHNICAL.value:
            return role_keywords + general_keywords[:TECHNICAL_GENERAL_KEYWORDS]

        if interview_type == InterviewType.BEHAVIORAL.value:
            return general_keywords

        return role_keywords + general_keywords


DEFAULT_KEYWORD_LIBRARY = KeywordLibrary()


def get_relevant_keywords(role: str, interview_type: str) -> list[str]:
    """Module-level shortcut using the default library."""
    return DEFAULT_KEYWORD_LIBRARY.get_relevant_keywords(role, interview_type)
