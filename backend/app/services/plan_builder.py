"""
Plan builder: turn a detail level into the ordered topic/question plan for one interview.
Bank order is preserved (topics and questions within a topic); no resorting.
"""
from dataclasses import dataclass

from app.services.errors import InvalidLevel
from app.services.question_bank import LEVELS, LEVEL_ORDER, DetailLevel, all_topics

_LEVELS_BY_ID = {level.id: level for level in LEVELS}


@dataclass(frozen=True)
class TopicPlanEntry:
    id: str
    name: str
    icon: str
    description: str
    questions: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
            "questions": list(self.questions),
        }


def get_level(level: str) -> DetailLevel:
    """Return the DetailLevel for an id; InvalidLevel if unknown."""
    if not isinstance(level, str) or level not in _LEVELS_BY_ID:
        raise InvalidLevel(level)
    return _LEVELS_BY_ID[level]


def build_plan(level: str) -> tuple[TopicPlanEntry, ...]:
    """
    Topics whose min_level is at or below `level`, each with questions of depth <= level.max_depth.
    Same level always gives the same plan.
    """
    config = get_level(level)
    level_index = LEVEL_ORDER.index(config.id)
    return tuple(
        TopicPlanEntry(
            id=topic.id,
            name=topic.name,
            icon=topic.icon,
            description=topic.description,
            questions=tuple(q.text for q in topic.questions if q.depth <= config.max_depth),
        )
        for topic in all_topics()
        if LEVEL_ORDER.index(topic.min_level) <= level_index
    )


def count_questions(level: str) -> int:
    return sum(len(entry.questions) for entry in build_plan(level))


def all_levels() -> list[dict]:
    """Level metadata for display, in canonical order, with the question count for each."""
    return [
        {
            "id": level.id,
            "label": level.label,
            "description": level.description,
            "page_estimate": level.page_estimate,
            "max_depth": level.max_depth,
            "question_count": count_questions(level.id),
        }
        for level in LEVELS
    ]
