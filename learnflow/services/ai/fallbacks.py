"""Deterministic content generators used when no AI model is available.

These produce responses with the same shape as the AI agents so clients
cannot tell the difference structurally.
"""

import random
import re

from learnflow import schemas
from learnflow.constants import FALLBACK_FLASHCARDS_MAX, SUMMARY_FALLBACK_CHARS

DEFAULT_TOPIC = "the given topic"
MAX_TOPIC_LENGTH = 50
MIN_SENTENCE_LENGTH = 20

_PROMPT_FILLER_WORDS = re.compile(
    r"\b(?:generate|create|make|mcq|questions?|about|on|for|the)\b", re.IGNORECASE
)
_SENTENCE_SPLIT = re.compile(r"[.!?]+")

# (question, correct answer, distractors); "{topic}" is substituted
MCQ_PATTERNS: list[tuple[str, str, tuple[str, str, str]]] = [
    (
        "What is the primary purpose of {topic}?",
        "To solve complex problems in {topic} domain",
        (
            "To complicate existing solutions",
            "To replace all existing methods",
            "To serve as a temporary solution",
        ),
    ),
    (
        "Which of the following best describes {topic}?",
        "A systematic approach to problem-solving",
        ("A random collection of ideas", "An outdated methodology", "A purely theoretical concept"),
    ),
    (
        "What is the main advantage of using {topic}?",
        "Improved efficiency and effectiveness",
        ("Increased complexity", "Reduced understanding", "Limited applicability"),
    ),
    (
        "In which scenario would {topic} be most beneficial?",
        "When dealing with complex, real-world problems",
        ("Only in academic settings", "Never in practical applications", "Only for simple tasks"),
    ),
    (
        "What fundamental principle underlies {topic}?",
        "Structured thinking and systematic analysis",
        ("Random trial and error", "Avoiding all complexity", "Ignoring established methods"),
    ),
    (
        "How does {topic} relate to other concepts in the field?",
        "It builds upon and extends existing knowledge",
        (
            "It contradicts all previous knowledge",
            "It has no connection to other concepts",
            "It replaces all other concepts",
        ),
    ),
    (
        "What skill is most important for understanding {topic}?",
        "Analytical and critical thinking",
        ("Memorization only", "Guessing and intuition", "Avoiding complex problems"),
    ),
    (
        "Which statement about {topic} is most accurate?",
        "It requires both theoretical knowledge and practical application",
        (
            "It is only theoretical with no practical use",
            "It requires no prior knowledge",
            "It cannot be learned or improved",
        ),
    ),
    (
        "What is a common challenge when working with {topic}?",
        "Balancing complexity with simplicity",
        ("It has no challenges", "Too simple to be useful", "Impossible to understand"),
    ),
    (
        "Why is mastering {topic} valuable?",
        "It enhances problem-solving capabilities and career prospects",
        ("It has no real value", "Only for passing exams", "It limits career options"),
    ),
]

_LEARNING_PATH_MODULES = [
    (
        "Introduction to {topic}",
        "Learn the fundamentals and core concepts",
        "1 week",
        ["Core Concepts", "History & Evolution", "Use Cases", "Getting Started"],
        "beginner",
    ),
    (
        "Building Foundations",
        "Strengthen your understanding with hands-on practice",
        "2 weeks",
        ["Basic Syntax", "Common Patterns", "Best Practices", "Mini Projects"],
        "beginner",
    ),
    (
        "Intermediate Concepts",
        "Dive deeper into advanced topics",
        "2 weeks",
        ["Advanced Patterns", "Optimization", "Real-world Applications", "Case Studies"],
        "intermediate",
    ),
    (
        "Advanced Techniques",
        "Master complex scenarios and edge cases",
        "2 weeks",
        ["Expert Patterns", "Performance Tuning", "Architecture", "Industry Standards"],
        "advanced",
    ),
    (
        "Capstone Project",
        "Apply everything you've learned in a real project",
        "1 week",
        ["Project Planning", "Implementation", "Testing", "Deployment"],
        "advanced",
    ),
]

_FLASHCARD_DIFFICULTIES = ("easy", "medium", "hard")


def extract_topic(prompt: str) -> str:
    """
    Strip request filler words from a prompt to get its topic.

    Examples:
        >>> extract_topic("Generate MCQ questions about Operating Systems")
        'operating systems'
        >>> extract_topic("questions on the")
        'the given topic'
    """
    topic = " ".join(_PROMPT_FILLER_WORDS.sub(" ", prompt.lower()).split())
    if len(topic) > MAX_TOPIC_LENGTH:
        topic = topic[: MAX_TOPIC_LENGTH - 3] + "..."
    return topic or DEFAULT_TOPIC


def generate_mcq_questions(
    prompt: str, num_questions: int, rng: random.Random | None = None
) -> list[schemas.MCQQuestion]:
    """Cycle through the pattern bank, shuffling options so the answer moves around."""
    rng = rng or random.Random()  # noqa: S311
    topic = extract_topic(prompt)

    questions = []
    for i in range(num_questions):
        question, correct, distractors = MCQ_PATTERNS[i % len(MCQ_PATTERNS)]
        correct = correct.format(topic=topic)
        options = [correct, *distractors]
        rng.shuffle(options)
        questions.append(
            schemas.MCQQuestion(
                question=question.format(topic=topic), options=options, correct_answer=correct
            )
        )
    return questions


def generate_learning_path(topic: str, level: str | None = None) -> schemas.GeneratedLearningPath:
    level = level or "beginner"
    prerequisites = (
        ["Basic computer skills"] if level == "beginner" else ["Fundamentals of programming"]
    )
    modules = [
        schemas.GeneratedModule(
            id=str(index),
            title=title.format(topic=topic),
            description=description,
            duration=duration,
            topics=topics,
            difficulty=difficulty,
        )
        for index, (title, description, duration, topics, difficulty) in enumerate(
            _LEARNING_PATH_MODULES, start=1
        )
    ]
    return schemas.GeneratedLearningPath(
        title=f"Master {topic}",
        description=(
            f"A comprehensive learning path to help you become proficient in {topic}, "
            f"tailored to your {level} level."
        ),
        total_duration="8 weeks",
        difficulty=level,
        prerequisites=prerequisites,
        estimated_completion="56 days",
        skills=[topic, "Problem Solving", "Critical Thinking", "Practical Application"],
        modules=modules,
    )


def generate_flashcards(content: str) -> list[schemas.GeneratedFlashcard]:
    """Turn the first sentences of the content into recall cards."""
    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(content)]
    sentences = [s for s in sentences if len(s) > MIN_SENTENCE_LENGTH]
    return [
        schemas.GeneratedFlashcard(
            id=f"card-{i}",
            front=f'What is the key concept in: "{sentence[:50]}..."?',
            back=sentence,
            difficulty=_FLASHCARD_DIFFICULTIES[i % len(_FLASHCARD_DIFFICULTIES)],
        )
        for i, sentence in enumerate(sentences[:FALLBACK_FLASHCARDS_MAX])
    ]


def summarize(content: str) -> schemas.Summary:
    return schemas.Summary(
        summary=content[:SUMMARY_FALLBACK_CHARS] + "...",
        key_points=["Key point 1", "Key point 2", "Key point 3"],
        concepts=["Concept 1", "Concept 2"],
    )
