"""
Interview navigation over a topic plan: resume point, next/previous question, topic jumps, progress.

Pure functions. Callers pass the plan (from plan_builder.build_plan) and the session's responses
in arrival order; responses only need .topic, .question and .answer attributes.
Nothing here reads or writes the database.
"""
import logging
from typing import NamedTuple, Sequence

from app.services.errors import InvalidIndex
from app.services.plan_builder import TopicPlanEntry

logger = logging.getLogger(__name__)


class Cursor(NamedTuple):
    topic_index: int
    question_index: int


START = Cursor(0, 0)


def _step_forward(plan: Sequence[TopicPlanEntry], t_idx: int, q_idx: int) -> Cursor:
    # Next question in topic, else first question of next topic, else stay put (end of plan).
    if q_idx < len(plan[t_idx].questions) - 1:
        return Cursor(t_idx, q_idx + 1)
    if t_idx < len(plan) - 1:
        return Cursor(t_idx + 1, 0)
    return Cursor(t_idx, q_idx)


def _topic_index(plan: Sequence[TopicPlanEntry], topic_id: str) -> int:
    for i, entry in enumerate(plan):
        if entry.id == topic_id:
            return i
    return -1


def initial_cursor(plan: Sequence[TopicPlanEntry], responses: Sequence) -> Cursor:
    """
    Where to resume: the question after the last stored response.

    - no responses -> (0, 0)
    - last response's topic not in this plan (e.g. plan built for another level) -> (0, 0)
    - last response's question not in its topic -> first question of that topic
    - last question of the last topic already answered -> stays on it; the caller
      must treat that as the end and offer draft generation
    """
    if not responses or not plan:
        return START
    last = responses[-1]
    t_idx = _topic_index(plan, last.topic)
    if t_idx < 0:
        logger.debug("Resume: topic %r not in current plan; starting from the beginning", last.topic)
        return START
    questions = plan[t_idx].questions
    if last.question not in questions:
        logger.debug("Resume: question not found in topic %r; starting topic from its first question", last.topic)
        return Cursor(t_idx, 0)
    return _step_forward(plan, t_idx, questions.index(last.question))


def advance(plan: Sequence[TopicPlanEntry], cursor: Cursor) -> Cursor:
    """Submit-and-advance / skip. No wrap: at the true end it returns the same cursor."""
    if not plan:
        return START
    return _step_forward(plan, cursor[0], cursor[1])


def retreat(plan: Sequence[TopicPlanEntry], cursor: Cursor) -> Cursor:
    """Previous question, crossing back into the previous topic's last question; no-op at (0, 0)."""
    t_idx, q_idx = cursor
    if q_idx > 0:
        return Cursor(t_idx, q_idx - 1)
    if t_idx > 0:
        prev = plan[t_idx - 1]
        return Cursor(t_idx - 1, max(len(prev.questions) - 1, 0))
    return Cursor(t_idx, q_idx)


def jump_to_topic(plan: Sequence[TopicPlanEntry], topic_index: int) -> Cursor:
    if isinstance(topic_index, bool) or not isinstance(topic_index, int) or not 0 <= topic_index < len(plan):
        raise InvalidIndex(f"Topic index out of range: {topic_index}")
    return Cursor(topic_index, 0)


def skip_topic(plan: Sequence[TopicPlanEntry], cursor: Cursor) -> Cursor:
    """First question of the next topic; on the last topic nothing changes."""
    t_idx = cursor[0]
    if t_idx < len(plan) - 1:
        return Cursor(t_idx + 1, 0)
    return Cursor(cursor[0], cursor[1])


def is_first(cursor: Cursor) -> bool:
    return cursor[0] == 0 and cursor[1] == 0


def is_last(plan: Sequence[TopicPlanEntry], cursor: Cursor) -> bool:
    if not plan:
        return True
    t_idx, q_idx = cursor
    return t_idx == len(plan) - 1 and q_idx == max(len(plan[t_idx].questions) - 1, 0)


def current_question(plan: Sequence[TopicPlanEntry], cursor: Cursor) -> tuple[TopicPlanEntry, str] | None:
    """(topic entry, question text) under the cursor, or None if the cursor points nowhere."""
    t_idx, q_idx = cursor
    if not 0 <= t_idx < len(plan):
        return None
    entry = plan[t_idx]
    if not 0 <= q_idx < len(entry.questions):
        return None
    return entry, entry.questions[q_idx]


def find_existing_answer(responses: Sequence, topic_id: str, question: str):
    """Stored response for this exact (topic, question), for pre-filling a revisited question."""
    for r in responses:
        if r.topic == topic_id and r.question == question:
            return r
    return None


def _answered_pairs(plan: Sequence[TopicPlanEntry], responses: Sequence) -> set[tuple[str, str]]:
    in_plan = {(entry.id, q) for entry in plan for q in entry.questions}
    return {(r.topic, r.question) for r in responses if (r.topic, r.question) in in_plan}


def progress(plan: Sequence[TopicPlanEntry], responses: Sequence) -> dict:
    """Answered/total over this plan; responses to questions outside the plan are not counted."""
    total = sum(len(entry.questions) for entry in plan)
    answered = len(_answered_pairs(plan, responses))
    percent = round(answered * 100 / total) if total else 0
    return {"answered": answered, "total": total, "percent": percent}


def topic_progress(plan: Sequence[TopicPlanEntry], responses: Sequence) -> list[dict]:
    answered = _answered_pairs(plan, responses)
    out = []
    for entry in plan:
        done = sum(1 for q in entry.questions if (entry.id, q) in answered)
        out.append({
            "topic_id": entry.id,
            "answered": done,
            "total": len(entry.questions),
            "complete": done >= len(entry.questions),
        })
    return out
