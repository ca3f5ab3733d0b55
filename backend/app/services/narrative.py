"""
Biography draft generator: stored interview answers -> Markdown life story.

Template-based prose, no model calls. Sections follow SECTIONS (not question bank order);
answers inside a section keep the order they were given. Output uses only #, ##, --- and *italic*.
"""
import re
from typing import Sequence

from app.services.errors import NoResponses

SHORT_LEVELS = frozenset({"ultra_brief", "brief"})

LEGACY_TOPIC = "legacy"

# Section order and headings for the draft. basic_info is the introduction.
SECTIONS: tuple[tuple[str, str], ...] = (
    ("basic_info", "Introduction"),
    ("early_life", "Early Life & Childhood"),
    ("family_heritage", "Family & Heritage"),
    ("education", "Education"),
    ("career", "Career & Work"),
    ("love_relationships", "Love & Relationships"),
    ("children_parenting", "Children & Parenting"),
    ("hobbies_passions", "Hobbies & Passions"),
    ("achievements", "Achievements & Milestones"),
    ("challenges", "Challenges & Resilience"),
    ("faith_values", "Faith & Values"),
    ("travel_adventures", "Travel & Adventures"),
    ("historical_moments", "A Life in History"),
    ("daily_life", "Daily Life"),
    ("reflections", "Life Reflections"),
    ("legacy", "Legacy"),
)

# First match wins; several patterns can match one question, so order matters.
LEAD_INS: list[tuple[re.Pattern, str]] = [
    (re.compile(p, re.IGNORECASE), phrase)
    for p, phrase in [
        (r"earliest memory", "Looking back to the earliest memories,"),
        (r"favorite things to do", "When it came to favorite pastimes,"),
        (r"best friend", "On the topic of childhood friendships,"),
        (r"holidays|special occasions", "When holidays and special occasions came around,"),
        (r"most vivid memory", "One memory stands out above the rest:"),
        (r"parents", "Speaking of family,"),
        (r"brothers or sisters|siblings", "Regarding siblings,"),
        (r"grandparents", "The grandparents also played a role:"),
        (r"school", "When it came to education,"),
        (r"first job", "The working years began early:"),
        (r"career|work.*life", "Career-wise,"),
        (r"proud", "With pride,"),
        (r"met.*partner|important person", "In matters of the heart,"),
        (r"wedding", "The wedding day was memorable:"),
        (r"children|parent", "As for family life,"),
        (r"hobby|hobbies|interests", "Beyond work and family,"),
        (r"challenge|difficult", "Life was not without its challenges:"),
        (r"strength|hope", "Through it all,"),
        (r"values|believe", "At the core,"),
        (r"travel|visited|trip", "Travel brought its own adventures:"),
        (r"world event|history", "Living through history,"),
        (r"grateful", "With deep gratitude,"),
        (r"advice|younger self", "With the wisdom of years,"),
        (r"remembered|legacy", "Looking toward the future,"),
    ]
]


def question_lead_in(question: str) -> str:
    """Narrative lead-in for a stored question text; "" when nothing matches."""
    for pattern, phrase in LEAD_INS:
        if pattern.search(question or ""):
            return phrase
    return ""


def _as_sentence(answer: str) -> str:
    if answer.endswith((".", "!", "?")):
        return answer
    return answer + "."


def weave_responses(responses: Sequence, short: bool) -> str:
    """
    Stitch one topic's answers into prose. Short levels: one run-on paragraph.
    Longer levels: a paragraph per answer, later ones opened with a lead-in from their question.
    """
    answers = [(r.question, (r.answer or "").strip()) for r in responses]
    answers = [(q, a) for q, a in answers if a]
    if short:
        return " ".join(_as_sentence(a) for _, a in answers) + "\n"
    paragraphs = []
    for i, (question, answer) in enumerate(answers):
        lead_in = question_lead_in(question) if i > 0 else ""
        text = _as_sentence(answer)
        paragraphs.append(f"{lead_in} {text}" if lead_in else text)
    return "\n\n".join(paragraphs) + "\n"


def group_by_topic(responses: Sequence) -> dict[str, list]:
    grouped: dict[str, list] = {}
    for r in responses:
        grouped.setdefault(r.topic, []).append(r)
    return grouped


def generate_draft(session, responses: Sequence) -> str:
    """
    Markdown biography for `session` (needs subject_name and detail_level) from its responses
    in arrival order. Raises NoResponses when there is nothing to write. Same input, same bytes.
    """
    if not responses:
        raise NoResponses("No responses recorded yet. Answer some questions first.")
    name = (session.subject_name or "").strip()
    short = session.detail_level in SHORT_LEVELS
    by_topic = group_by_topic(responses)

    parts = [
        f"# The Life of {name}\n\n",
        "*A biographical narrative based on a personal interview.*\n\n",
        "---\n",
    ]
    for topic_id, heading in SECTIONS:
        topic_responses = by_topic.get(topic_id)
        if not topic_responses:
            continue
        parts.append(f"\n## {heading}\n\n")
        parts.append(weave_responses(topic_responses, short))

    parts.append("\n---\n\n")
    if by_topic.get(LEGACY_TOPIC):
        parts.append(f"*This biography was created from a personal interview with {name}.*\n")
    else:
        parts.append(
            f"*This biography was created from a personal interview with {name}. "
            "The story continues to unfold.*\n"
        )
    return "".join(parts)
