"""
Domain mapper for InterviewAce

Maps the onboarding domains onto the roles and categories the question
bank is organized by, plus the skills each domain emphasizes.
"""

from collections import Counter

from interviewace.models.evaluation import InterviewType
from interviewace.models.profile import UserDomain
from interviewace.models.question import QuestionRole
from interviewace.models.recommendation import DomainMapping, SessionConfig


MAX_SKILL_FOCUS = 5


DOMAIN_TO_ROLE: dict[UserDomain, QuestionRole] = {
    UserDomain.FRONTEND: QuestionRole.FRONTEND,
    UserDomain.BACKEND: QuestionRole.BACKEND,
    UserDomain.FULLSTACK: QuestionRole.FULLSTACK,
    UserDomain.DATA_SCIENCE: QuestionRole.BACKEND,
    UserDomain.DEVOPS: QuestionRole.BACKEND,
    UserDomain.MOBILE: QuestionRole.FRONTEND,
    UserDomain.MACHINE_LEARNING: QuestionRole.BACKEND,
    UserDomain.SYSTEM_DESIGN: QuestionRole.FULLSTACK,
    UserDomain.CYBERSECURITY: QuestionRole.BACKEND,
    UserDomain.CLOUD: QuestionRole.BACKEND,
}

DOMAIN_SKILL_FOCUS: dict[UserDomain, tuple[str, ...]] = {
    UserDomain.FRONTEND: ("React", "JavaScript", "CSS", "Web Performance", "UI/UX"),
    UserDomain.BACKEND: ("APIs", "Databases", "System Architecture", "Scalability"),
    UserDomain.FULLSTACK: ("Full-Stack Architecture", "API Design", "Database Design"),
    UserDomain.DATA_SCIENCE: ("Algorithms", "Data Structures", "Statistics", "ML Basics"),
    UserDomain.DEVOPS: ("System Administration", "CI/CD", "Infrastructure", "Monitoring"),
    UserDomain.MOBILE: ("Mobile Architecture", "Performance", "Native vs Cross-platform"),
    UserDomain.MACHINE_LEARNING: ("Algorithm Design", "Data Processing", "Model Training"),
    UserDomain.SYSTEM_DESIGN: ("System Architecture", "Scalability", "Distributed Systems"),
    UserDomain.CYBERSECURITY: ("Security Principles", "Cryptography", "Vulnerability Assessment"),
    UserDomain.CLOUD: ("Cloud Architecture", "Serverless", "Microservices", "DevOps"),
}

DOMAIN_RESOURCE_CATEGORIES: dict[UserDomain, tuple[str, ...]] = {
    UserDomain.FRONTEND: ("algorithm-design", "system-architecture"),
    UserDomain.BACKEND: ("algorithm-design", "system-architecture", "database-design"),
    UserDomain.FULLSTACK: ("algorithm-design", "system-architecture", "database-design"),
    UserDomain.DATA_SCIENCE: ("algorithm-design", "system-architecture"),
    UserDomain.DEVOPS: ("system-architecture", "database-design"),
    UserDomain.MOBILE: ("algorithm-design", "system-architecture"),
    UserDomain.MACHINE_LEARNING: ("algorithm-design", "system-architecture"),
    UserDomain.SYSTEM_DESIGN: ("system-architecture", "database-design"),
    UserDomain.CYBERSECURITY: ("algorithm-design", "system-architecture"),
    UserDomain.CLOUD: ("system-architecture", "database-design"),
}

SYSTEM_DESIGN_DOMAINS = frozenset({UserDomain.SYSTEM_DESIGN, UserDomain.CLOUD, UserDomain.DEVOPS})


def _dedupe(items) -> list:
    return list(dict.fromkeys(items))


def map_domains_to_questions(domains: list[UserDomain]) -> DomainMapping:
    """
    Derive question-bank roles, preferred categories and skill focus.

    Roles are ranked by how many selected domains map onto them; ties keep
    the order in which roles were first seen. Missing ranks default to
    the general role.
    """
    domains = [UserDomain(domain) for domain in domains]

    # Counter preserves first-insertion order and most_common() sorts stably
    role_counts = Counter(DOMAIN_TO_ROLE[domain] for domain in domains)
    ranked_roles = [role for role, _ in role_counts.most_common()]

    primary_role = ranked_roles[0] if ranked_roles else QuestionRole.GENERAL
    secondary_role = ranked_roles[1] if len(ranked_roles) > 1 else QuestionRole.GENERAL

    selected = set(domains)
    categories: list[str] = []
    if selected - {UserDomain.SYSTEM_DESIGN}:
        categories.append(InterviewType.TECHNICAL.value)
    if selected & SYSTEM_DESIGN_DOMAINS or len(domains) >= 3:
        categories.append(InterviewType.SYSTEM_DESIGN.value)
    categories.append(InterviewType.BEHAVIORAL.value)
    if len(domains) >= 2:
        categories.append(InterviewType.HR.value)

    skill_focus = _dedupe(
        skill for domain in domains for skill in DOMAIN_SKILL_FOCUS[domain]
    )[:MAX_SKILL_FOCUS]

    return DomainMapping(
        primary_role=primary_role,
        secondary_role=secondary_role,
        preferred_categories=categories,
        skill_focus=skill_focus,
    )


def get_domain_resource_categories(domains: list[UserDomain]) -> list[str]:
    """Resource category ids relevant to the given domains, deduplicated."""
    return _dedupe(
        category
        for domain in domains
        for category in DOMAIN_RESOURCE_CATEGORIES[UserDomain(domain)]
    )


def recommend_session_config(domains: list[UserDomain], weakness: str | None = None) -> SessionConfig:
    """
    Suggest a session configuration, optionally steered by a weakness.

    Communication or clarity weaknesses get a behavioral session, technical
    ones a technical session on the primary role, confidence an HR session.
    Anything else keeps a technical session on the primary role.
    """
    mapping = map_domains_to_questions(domains)

    role = mapping.primary_role
    session_type = InterviewType.TECHNICAL.value

    if weakness:
        weakness = weakness.lower()
        if "communication" in weakness or "clarity" in weakness:
            role, session_type = QuestionRole.GENERAL, InterviewType.BEHAVIORAL.value
        elif "technical" in weakness:
            role, session_type = mapping.primary_role, InterviewType.TECHNICAL.value
        elif "confidence" in weakness:
            role, session_type = QuestionRole.GENERAL, InterviewType.HR.value

    return SessionConfig(
        role=role,
        type=session_type,
        categories=mapping.preferred_categories,
        skill_focus=mapping.skill_focus,
    )
