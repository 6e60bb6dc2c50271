"""
Tests for interviewace.core.domain_mapper
"""

import pytest

from interviewace.core.domain_mapper import (
    get_domain_resource_categories,
    map_domains_to_questions,
    recommend_session_config,
)
from interviewace.models.profile import UserDomain
from interviewace.models.question import QuestionRole


class TestMapDomains:
    def test_three_domains(self):
        mapping = map_domains_to_questions([UserDomain.FRONTEND, UserDomain.MOBILE, UserDomain.BACKEND])

        assert mapping.primary_role == QuestionRole.FRONTEND
        assert mapping.secondary_role == QuestionRole.BACKEND
        assert mapping.preferred_categories == ["technical", "system-design", "behavioral", "hr"]
        assert mapping.skill_focus == ["React", "JavaScript", "CSS", "Web Performance", "UI/UX"]

    def test_system_design_only(self):
        mapping = map_domains_to_questions([UserDomain.SYSTEM_DESIGN])

        assert mapping.primary_role == QuestionRole.FULLSTACK
        assert mapping.secondary_role == QuestionRole.GENERAL
        assert mapping.preferred_categories == ["system-design", "behavioral"]

    def test_single_frontend_domain(self):
        mapping = map_domains_to_questions([UserDomain.FRONTEND])
        assert mapping.preferred_categories == ["technical", "behavioral"]

    def test_role_ties_keep_first_seen_order(self):
        mapping = map_domains_to_questions([UserDomain.BACKEND, UserDomain.FRONTEND])

        assert mapping.primary_role == QuestionRole.BACKEND
        assert mapping.secondary_role == QuestionRole.FRONTEND

    def test_majority_role_wins(self):
        mapping = map_domains_to_questions([UserDomain.FRONTEND, UserDomain.CLOUD, UserDomain.DEVOPS])
        assert mapping.primary_role == QuestionRole.BACKEND

    def test_skill_focus_is_deduplicated(self):
        mapping = map_domains_to_questions([UserDomain.SYSTEM_DESIGN, UserDomain.BACKEND])

        assert len(mapping.skill_focus) == len(set(mapping.skill_focus))
        assert mapping.skill_focus == [
            "System Architecture",
            "Scalability",
            "Distributed Systems",
            "APIs",
            "Databases",
        ]

    def test_accepts_plain_strings(self):
        mapping = map_domains_to_questions(["frontend"])
        assert mapping.primary_role == QuestionRole.FRONTEND


class TestSessionConfig:
    def test_default_is_technical(self):
        config = recommend_session_config([UserDomain.BACKEND])

        assert config.role == QuestionRole.BACKEND
        assert config.type == "technical"
        assert config.difficulty is None

    def test_system_design_only_defaults_to_technical(self):
        config = recommend_session_config([UserDomain.SYSTEM_DESIGN])

        assert config.role == QuestionRole.FULLSTACK
        assert config.type == "technical"
        assert config.categories == ["system-design", "behavioral"]

    @pytest.mark.parametrize(
        "weakness,role,session_type",
        [
            ("communication", QuestionRole.GENERAL, "behavioral"),
            ("Clarity", QuestionRole.GENERAL, "behavioral"),
            ("technical", QuestionRole.FULLSTACK, "technical"),
            ("confidence", QuestionRole.GENERAL, "hr"),
            ("time management", QuestionRole.FULLSTACK, "technical"),
        ],
    )
    def test_weakness_overrides(self, weakness, role, session_type):
        config = recommend_session_config([UserDomain.SYSTEM_DESIGN], weakness)

        assert config.role == role
        assert config.type == session_type
        assert config.categories == ["system-design", "behavioral"]


def test_resource_categories_are_deduplicated():
    categories = get_domain_resource_categories([UserDomain.FRONTEND, UserDomain.BACKEND, UserDomain.CLOUD])
    assert categories == ["algorithm-design", "system-architecture", "database-design"]
