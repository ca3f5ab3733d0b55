"""
Biography interview question bank: fixed catalog of life topics and detail levels.

Questions are grouped by topic; each question carries a depth 1-5. A detail level
includes every topic whose min_level is at or below it, and within those topics every
question whose depth is at most the level's max_depth.

  ultra_brief   - ~15 questions, core topics only          (~1 page)
  brief         - ~35 questions, adds school/work/love/...  (2-5 pages)
  moderate      - ~70 questions, most topics                (10-20 pages)
  detailed      - ~120 questions, all topics + follow-ups   (20-50 pages)
  comprehensive - ~200 questions, everything                (50-100+ pages)

Built once at import; nothing here is mutated at runtime.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    text: str
    depth: int


@dataclass(frozen=True)
class Topic:
    id: str
    name: str
    icon: str
    description: str
    min_level: str
    questions: tuple[Question, ...]


@dataclass(frozen=True)
class DetailLevel:
    id: str
    max_depth: int
    label: str
    description: str
    page_estimate: str


LEVELS: tuple[DetailLevel, ...] = (
    DetailLevel("ultra_brief", 1, "Ultra Brief", "About 1 page — just the highlights", "~1 page"),
    DetailLevel("brief", 2, "Brief", "About 2-5 pages — key moments and memories", "2-5 pages"),
    DetailLevel("moderate", 3, "Moderate", "About 10-20 pages — a well-rounded life story", "10-20 pages"),
    DetailLevel("detailed", 4, "Detailed", "About 20-50 pages — rich detail and context", "20-50 pages"),
    DetailLevel("comprehensive", 5, "Comprehensive", "50-100+ pages — the full story of a life", "50-100+ pages"),
)

LEVEL_ORDER: tuple[str, ...] = tuple(level.id for level in LEVELS)


def _topic(
    topic_id: str,
    name: str,
    icon: str,
    description: str,
    min_level: str,
    questions: list[tuple[str, int]],
) -> Topic:
    return Topic(topic_id, name, icon, description, min_level, tuple(Question(t, d) for t, d in questions))


TOPICS: tuple[Topic, ...] = (
    _topic("basic_info", "Basic Information", "user", "Let's start with the basics about you.", "ultra_brief", [
        ("What is your full name? Were you named after anyone special?", 1),
        ("When and where were you born?", 1),
        ("What was your hometown like when you were growing up?", 2),
        ("Do you have any nicknames? How did you get them?", 3),
        ("What is your cultural or ethnic background, and what does it mean to you?", 2),
        ("If someone asked you to describe yourself in a few sentences, what would you say?", 4),
    ]),
    _topic("early_life", "Early Life & Childhood", "baby", "Tell me about your earliest years.", "ultra_brief", [
        ("What is your earliest memory?", 1),
        ("Describe the home you grew up in. What did it look like and feel like?", 2),
        ("What were your favorite things to do as a child?", 1),
        ("Who was your best friend growing up, and what did you do together?", 2),
        ("What were holidays and special occasions like in your family?", 2),
        ("What is the most vivid memory from your childhood?", 1),
        ("Were there any childhood experiences that shaped who you became?", 3),
        ("What games or activities were popular when you were young?", 3),
        ("What did your neighborhood look like? Who were your neighbors?", 4),
        ("Did you have any pets growing up? Tell me about them.", 3),
        ("What was your favorite food as a child? Did anyone special make it?", 4),
        ("Were you ever in trouble as a kid? What happened?", 4),
        ("What were bedtime routines like? Did anyone read to you or tell stories?", 5),
        ("What smells, sounds, or sensations bring you right back to childhood?", 5),
    ]),
    _topic("family_heritage", "Family & Heritage", "family", "Let's talk about your family.", "ultra_brief", [
        ("Tell me about your parents. What were they like?", 1),
        ("Do you have brothers or sisters? What was your relationship like growing up?", 1),
        ("Were there any family traditions that were important to your family?", 2),
        ("Tell me about your grandparents. What do you remember about them?", 2),
        ("What values did your family believe in most strongly?", 2),
        ("Were there any family stories that were passed down through generations?", 3),
        ("What did your parents do for a living? How did that affect family life?", 3),
        ("How would you describe your family's financial situation growing up?", 3),
        ("Were there any family members who had an especially big influence on you?", 3),
        ("Do you know where your ancestors came from? What do you know about your family's history?", 4),
        ("How did your family handle disagreements or difficult times?", 4),
        ("What is the funniest family story you remember?", 4),
        ("Were there any family recipes, songs, or customs that have been passed down?", 5),
        ("How has your relationship with your family changed over the years?", 5),
    ]),
    _topic("education", "Education & Learning", "school", "Tell me about your school years.", "brief", [
        ("Where did you go to school? What was it like?", 1),
        ("What were your favorite subjects, and were there any teachers who made a big impression on you?", 1),
        ("What is the most important thing school taught you — inside or outside the classroom?", 2),
        ("Were there any struggles or triumphs during your school years?", 2),
        ("Did you go to college or any training after high school? What was that experience like?", 2),
        ("Were you involved in any sports, clubs, or activities at school?", 3),
        ("What was the social scene like at your school? Who did you spend time with?", 3),
        ("Is there anything you wish you had learned or studied?", 4),
        ("Did any books, ideas, or courses change the way you think about the world?", 4),
        ("How did your education prepare you — or not prepare you — for adult life?", 5),
        ("Were there any moments in school that you still think about today?", 5),
    ]),
    _topic("career", "Career & Work", "briefcase", "Let's talk about your working life.", "brief", [
        ("What was your first job? How did you get it?", 1),
        ("What kind of work did you do for most of your life? What drew you to it?", 1),
        ("What is the achievement you're most proud of in your career?", 1),
        ("Were there people at work — bosses, coworkers, mentors — who really influenced you?", 2),
        ("Was there a moment when your career took an unexpected turn?", 2),
        ("What did you enjoy most about your work? What did you enjoy least?", 3),
        ("How did you balance work with the rest of your life?", 3),
        ("Did you ever consider a completely different career path?", 3),
        ("What was the toughest challenge you faced at work, and how did you handle it?", 4),
        ("If you could give career advice to a young person today, what would it be?", 4),
        ("How did your work change over the decades? What changes in your field did you witness?", 5),
        ("What does retirement look like for you — or what do you imagine it will be like?", 5),
    ]),
    _topic("love_relationships", "Love & Relationships", "heart",
           "Tell me about the important relationships in your life.", "brief", [
        ("How did you meet the most important person in your life? What drew you to them?", 1),
        ("Can you tell me about your wedding day or the day you committed to your partner?", 2),
        ("What do you think makes a relationship last?", 1),
        ("What is your happiest memory with your partner?", 2),
        ("Who have been your closest friends throughout life? What made those friendships special?", 2),
        ("Have you ever lost someone you loved deeply? How did you cope?", 3),
        ("What has love taught you over the years?", 3),
        ("Were there relationships that changed you as a person?", 4),
        ("How have your ideas about love changed from when you were young to now?", 4),
        ("What is the kindest thing someone has ever done for you?", 5),
        ("Is there anything you wish you had said to someone but never got the chance?", 5),
    ]),
    _topic("children_parenting", "Children & Parenting", "baby-carriage",
           "Tell me about your experience as a parent (or about the children in your life).", "moderate", [
        ("Do you have children? Tell me about them.", 1),
        ("What was it like becoming a parent for the first time?", 2),
        ("What is your proudest moment as a parent?", 2),
        ("What was your approach to parenting? Was it similar to how you were raised?", 3),
        ("What are some of your favorite memories with your children?", 3),
        ("What did you learn from your children that surprised you?", 3),
        ("How has your relationship with your children changed as they've grown?", 4),
        ("Do you have grandchildren? What is that experience like?", 4),
        ("If you could pass on one lesson to your children and grandchildren, what would it be?", 4),
        ("What traditions have you started or continued with your family?", 5),
        ("What do you hope your children and grandchildren remember most about you?", 5),
    ]),
    _topic("hobbies_passions", "Hobbies & Passions", "palette", "What do you love to do?", "moderate", [
        ("What hobbies or interests have you enjoyed throughout your life?", 1),
        ("Is there a skill or talent you're particularly proud of?", 2),
        ("How did you first get into your favorite hobby or activity?", 2),
        ("Have your interests changed over the years, or have some stayed constant?", 3),
        ("Did any of your hobbies lead to unexpected friendships or experiences?", 3),
        ("What creative pursuits have been meaningful to you — music, art, writing, crafts?", 4),
        ("Is there something you always wanted to learn but never got around to?", 4),
        ("What activities bring you the most joy or peace right now?", 5),
    ]),
    _topic("achievements", "Achievements & Milestones", "trophy", "What are you most proud of?", "moderate", [
        ("What accomplishment in your life are you most proud of?", 1),
        ("Was there a success that surprised you or that you didn't expect?", 2),
        ("Have you received any awards, honors, or special recognition?", 3),
        ("What personal milestone meant the most to you?", 3),
        ("Is there something you accomplished that others might not know about?", 4),
        ("What obstacles did you overcome to achieve something important?", 4),
        ("How do you define success in your own life?", 5),
    ]),
    _topic("challenges", "Challenges & Resilience", "mountain",
           "Life isn't always easy. Tell me about the tough times.", "brief", [
        ("What has been the greatest challenge you've faced in your life?", 1),
        ("How did you get through the most difficult times?", 1),
        ("What gave you strength or hope when things were hard?", 2),
        ("Is there a lesson you learned from a difficult experience that you carry with you?", 2),
        ("Was there a moment you thought you couldn't go on, but you did?", 3),
        ("Did any hardship end up leading to something positive?", 3),
        ("How did your struggles shape the person you are today?", 4),
        ("What would you tell someone going through a similar challenge?", 4),
        ("Were there people who helped you through your hardest times? Who were they?", 5),
    ]),
    _topic("faith_values", "Faith & Values", "compass", "What do you believe in?", "moderate", [
        ("What are the core values that have guided your life?", 1),
        ("Do you have a spiritual or religious faith? How has it shaped your life?", 2),
        ("Has your philosophy of life changed over the years?", 2),
        ("Was there a moment or experience that deepened or changed your beliefs?", 3),
        ("What does living a good life mean to you?", 3),
        ("How have your values influenced the choices you've made?", 4),
        ("Is there a quote, prayer, or saying that has been meaningful to you?", 5),
        ("What do you think happens after we die?", 5),
    ]),
    _topic("travel_adventures", "Travel & Adventures", "globe", "Where has life taken you?", "moderate", [
        ("What has been your favorite place you've ever visited?", 1),
        ("Tell me about the most memorable trip or adventure you've had.", 2),
        ("Have you ever lived anywhere other than where you grew up?", 2),
        ("Is there a place you've always wanted to go but haven't yet?", 3),
        ("What is the most adventurous thing you've ever done?", 3),
        ("Did any journey or trip change your perspective on life?", 4),
        ("What places feel like home to you, and why?", 5),
    ]),
    _topic("historical_moments", "Historical Moments", "clock",
           "You've lived through some remarkable times.", "detailed", [
        ("What major world event do you remember most vividly? Where were you when it happened?", 2),
        ("How have you seen the world change during your lifetime?", 2),
        ("What invention or technological change has had the biggest impact on your life?", 3),
        ("Were there historical events that directly affected you or your family?", 3),
        ("What changes in society have made you proud? What changes concern you?", 4),
        ("If you could tell a young person one thing about what life was like in your era, what would it be?", 4),
        ("How have cultural norms and expectations changed from when you were young?", 5),
        ("What do you think the world has gotten better at? What has it gotten worse at?", 5),
    ]),
    _topic("daily_life", "Daily Life & Routines", "sun", "Tell me about everyday life.", "detailed", [
        ("Describe a typical day in your life right now.", 3),
        ("What does a perfect day look like for you?", 3),
        ("What small pleasures do you enjoy most?", 4),
        ("What are your favorite foods or meals?", 4),
        ("Do you have any daily rituals or routines that are important to you?", 4),
        ("What music, books, movies, or shows do you enjoy?", 5),
        ("How has your daily life changed from when you were younger?", 5),
    ]),
    _topic("reflections", "Life Reflections", "sunset", "Looking back on your life...", "ultra_brief", [
        ("If you could go back and give your younger self one piece of advice, what would it be?", 1),
        ("What are you most grateful for in your life?", 1),
        ("Is there anything you would do differently if you could?", 2),
        ("What do you think is the most important thing in life?", 2),
        ("What makes you laugh the most?", 3),
        ("What has surprised you most about getting older?", 3),
        ("What do you know now that you wish you knew at 20?", 4),
        ("What moments in your life would you want to relive?", 4),
        ("How would you describe the theme or story of your life?", 5),
    ]),
    _topic("legacy", "Legacy & Messages", "scroll", "What do you want the world to remember?", "ultra_brief", [
        ("What do you want your family to know about you and your life?", 1),
        ("What advice would you give to the next generation?", 1),
        ("How would you like to be remembered?", 2),
        ("Is there a message you'd like to leave for your grandchildren or great-grandchildren?", 2),
        ("What do you hope your legacy will be?", 3),
        ("If you could write one final chapter of your story, what would you want it to say?", 3),
        ("What values or traditions do you most hope will carry on after you?", 4),
        ("Is there anything else you'd like to share that we haven't talked about?", 5),
    ]),
)

_TOPICS_BY_ID = {t.id: t for t in TOPICS}


def _check_bank(topics: tuple[Topic, ...], levels: tuple[DetailLevel, ...]) -> None:
    """Raise ValueError if the catalog is empty or has an unknown min_level / out-of-range depth."""
    if not topics:
        raise ValueError("question bank is empty")
    level_ids = {level.id for level in levels}
    seen = set()
    for topic in topics:
        if topic.id in seen:
            raise ValueError(f"duplicate topic id: {topic.id}")
        seen.add(topic.id)
        if topic.min_level not in level_ids:
            raise ValueError(f"topic {topic.id}: unknown min_level {topic.min_level!r}")
        for q in topic.questions:
            if not isinstance(q.depth, int) or not 1 <= q.depth <= 5:
                raise ValueError(f"topic {topic.id}: depth must be 1-5, got {q.depth!r}")


_check_bank(TOPICS, LEVELS)


def all_topics() -> tuple[Topic, ...]:
    """All topics in canonical bank order."""
    return TOPICS


def get_topic(topic_id: str) -> Topic | None:
    return _TOPICS_BY_ID.get(topic_id)
