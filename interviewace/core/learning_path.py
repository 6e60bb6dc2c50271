"""
Learning path generator for InterviewAce

Builds a foundation -> practice -> application -> mastery sequence for
the user's most critical weakness. Students stop after application.
"""

import re

from interviewace.core.text import round_half_up
from interviewace.models.profile import ExperienceLevel, Skill, SkillBreakdown, WeakArea
from interviewace.models.recommendation import (
    LearningPath,
    LearningPriority,
    LearningStep,
    LearningTimeframe,
)
from interviewace.models.resources import (
    DEFAULT_RESOURCE_CATALOG,
    Resource,
    ResourceCatalog,
    ResourceDifficulty,
    ResourceType,
)


RESOURCES_PER_STEP = 2
TARGET_IMPROVEMENT = 3

HOURS_PER_DAY = 8
HOURS_PER_WEEK = 40

CRITICAL_WEAKNESSES: tuple[str, ...] = (
    WeakArea.ALGORITHM_DESIGN.value,
    WeakArea.SYSTEM_ARCHITECTURE.value,
    WeakArea.COMMUNICATION_CLARITY.value,
)

SKILL_TO_WEAK_AREA: dict[Skill, str] = {
    Skill.TECHNICAL: WeakArea.ALGORITHM_DESIGN.value,
    Skill.COMMUNICATION: WeakArea.COMMUNICATION_CLARITY.value,
    Skill.CLARITY: WeakArea.COMMUNICATION_CLARITY.value,
    Skill.CONFIDENCE: WeakArea.CONFIDENCE_BUILDING.value,
}

SUCCESS_METRICS: dict[str, tuple[str, ...]] = {
    WeakArea.ALGORITHM_DESIGN.value: (
        "Solve 80% of easy algorithmic problems correctly",
        "Explain time/space complexity accurately",
        "Design efficient algorithms for new problems",
    ),
    WeakArea.SYSTEM_ARCHITECTURE.value: (
        "Design scalable system architectures",
        "Identify bottlenecks and optimization opportunities",
        "Explain trade-offs in system design decisions",
    ),
    WeakArea.COMMUNICATION_CLARITY.value: (
        "Explain technical concepts in simple terms",
        "Structure responses using clear frameworks (STAR method)",
        "Maintain clarity under interview pressure",
    ),
    WeakArea.CONFIDENCE_BUILDING.value: (
        "Complete interviews without freezing or panic",
        "Maintain steady performance across multiple sessions",
        "Ask clarifying questions confidently",
    ),
}

DEFAULT_SUCCESS_METRICS: tuple[str, ...] = (
    "Improve performance scores by 3+ points",
    "Complete practice sessions consistently",
    "Demonstrate mastery in interview simulations",
)

_LEADING_NUMBER = re.compile(r"\d+")


def identify_primary_weakness(weak_areas: list[str], skill_breakdown: SkillBreakdown) -> str:
    """
    The weakness a learning path should target.

    Explicit weak areas win, critical ones first. Without any, the lowest
    skill (first in skill order on ties) is mapped to a learning area.
    """
    weak_areas = [WeakArea(area).value for area in weak_areas]
    if weak_areas:
        for area in weak_areas:
            if area in CRITICAL_WEAKNESSES:
                return area
        return weak_areas[0]

    lowest, _ = min(skill_breakdown.items(), key=lambda item: item[1])
    return SKILL_TO_WEAK_AREA[lowest]


def _readable(weakness: str) -> str:
    return weakness.replace("-", " ", 1)


def _title(weakness: str) -> str:
    return " ".join(word.capitalize() for word in weakness.split("-"))


def _first(resources: list[Resource], keep) -> list[Resource]:
    return [resource for resource in resources if keep(resource)][:RESOURCES_PER_STEP]


def build_learning_steps(
    weakness: str,
    experience_level: ExperienceLevel,
    catalog: ResourceCatalog = DEFAULT_RESOURCE_CATALOG,
) -> list[LearningStep]:
    resources = catalog.get_resources_for_weak_areas([weakness])
    readable = _readable(weakness)
    is_student = experience_level == ExperienceLevel.STUDENT

    steps = [
        LearningStep(
            id="foundation",
            title=f"{_title(weakness)} Fundamentals",
            description=f"Build core understanding of {readable} concepts",
            priority=LearningPriority.CRITICAL,
            timeframe=LearningTimeframe.IMMEDIATE,
            estimated_duration="2-3 hours" if is_student else "1-2 hours",
            resources=_first(resources, lambda r: r.difficulty == ResourceDifficulty.BEGINNER),
            completion_criteria="Complete foundational resources and demonstrate basic understanding",
            next_steps=["practice", "application"],
        ),
        LearningStep(
            id="practice",
            title="Guided Practice",
            description=f"Apply {readable} concepts through structured exercises",
            priority=LearningPriority.HIGH,
            timeframe=LearningTimeframe.SHORT_TERM,
            estimated_duration="3-5 hours",
            resources=_first(resources, lambda r: r.type == ResourceType.PRACTICE),
            completion_criteria="Complete practice exercises with 70% accuracy",
            next_steps=["application", "mastery"],
        ),
        LearningStep(
            id="application",
            title="Real-world Application",
            description=f"Use {readable} skills in interview-style scenarios",
            priority=LearningPriority.HIGH,
            timeframe=LearningTimeframe.SHORT_TERM,
            estimated_duration="2-4 hours",
            resources=_first(resources, lambda r: r.difficulty == ResourceDifficulty.INTERMEDIATE),
            completion_criteria="Successfully complete interview simulation with improved performance",
            next_steps=["mastery"],
        ),
    ]

    if not is_student:
        steps.append(LearningStep(
            id="mastery",
            title="Advanced Mastery",
            description=f"Achieve expert-level proficiency in {readable}",
            priority=LearningPriority.MEDIUM,
            timeframe=LearningTimeframe.LONG_TERM,
            estimated_duration="5-8 hours",
            resources=_first(resources, lambda r: r.difficulty == ResourceDifficulty.ADVANCED),
            completion_criteria="Demonstrate advanced concepts and teach others",
            next_steps=[],
        ))

    return steps


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def calculate_total_duration(steps: list[LearningStep]) -> str:
    """
    Sum the lower bound of each step's duration.

    Up to a working day is reported in hours, up to a working week in
    days, anything longer in weeks.
    """
    total_hours = 0
    for step in steps:
        match = _LEADING_NUMBER.search(step.estimated_duration)
        total_hours += int(match.group()) if match else 0

    if total_hours <= HOURS_PER_DAY:
        return _plural(total_hours, "hour")
    if total_hours <= HOURS_PER_WEEK:
        return _plural(round_half_up(total_hours / HOURS_PER_DAY), "day")
    return _plural(round_half_up(total_hours / HOURS_PER_WEEK), "week")


def generate_learning_path(
    weak_areas: list[str],
    skill_breakdown: SkillBreakdown,
    experience_level: ExperienceLevel,
    catalog: ResourceCatalog = DEFAULT_RESOURCE_CATALOG,
) -> LearningPath:
    """
    Generate a personalized learning path.

    Args:
        weak_areas: Self-identified weak areas, in the user's order
        skill_breakdown: Current 0-10 skill scores
        experience_level: Drives step durations and whether mastery is included
        catalog: Resource catalog to draw step resources from

    Returns:
        LearningPath with a deterministic path_id
    """
    experience_level = ExperienceLevel(experience_level)
    weakness = identify_primary_weakness(weak_areas, skill_breakdown)
    steps = build_learning_steps(weakness, experience_level, catalog)

    current = skill_breakdown.mean
    target = min(current + TARGET_IMPROVEMENT, 10)

    return LearningPath(
        path_id=f"{weakness}-{experience_level.value}",
        title=f"{_title(weakness)} Mastery Path ({experience_level.display_name})",
        description=(
            f"Structured learning path to improve {_readable(weakness)} skills "
            f"from {round_half_up(current)}/10 to {round_half_up(target)}/10 "
            f"through progressive exercises and real-world application."
        ),
        total_duration=calculate_total_duration(steps),
        primary_weakness=weakness,
        steps=steps,
        milestones=[f"Complete {step.title} with {step.completion_criteria}" for step in steps],
        success_metrics=list(SUCCESS_METRICS.get(weakness, DEFAULT_SUCCESS_METRICS)),
    )
