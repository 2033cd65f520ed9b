from pydantic_ai import Agent
from pydantic_ai.settings import ModelSettings

from learnflow import schemas
from learnflow.services.ai.ai_model import get_ai_model

# Quizzes need variety between runs; summaries should stay close to the source
MCQ_SETTINGS = ModelSettings(temperature=0.8)
LEARNING_PATH_SETTINGS = ModelSettings(temperature=0.6)
FLASHCARD_SETTINGS = ModelSettings(temperature=0.4)
SUMMARY_SETTINGS = ModelSettings(temperature=0.2, max_tokens=1500)


def get_mcq_agent() -> Agent[None, schemas.MCQResponse]:
    return Agent(
        get_ai_model("mcq"),
        output_type=schemas.MCQResponse,
        model_settings=MCQ_SETTINGS,
        instructions="""
        You are an expert quiz generator. Generate high-quality multiple-choice questions
        about the topic or content given by the user.

        Requirements:
        - Generate exactly the number of questions the user asks for
        - Every question has exactly 4 options
        - correct_answer must be the exact text of one of the options
        - Vary difficulty between easy, medium and hard
        - Add a short explanation of why the correct answer is correct
        - Questions should be educational and engaging
        """,
    )


def get_learning_path_agent() -> Agent[None, schemas.GeneratedLearningPath]:
    return Agent(
        get_ai_model("learning_path"),
        output_type=schemas.GeneratedLearningPath,
        model_settings=LEARNING_PATH_SETTINGS,
        instructions="""
        You design structured learning paths for students.
        Given a topic, the learner's current level, their goal and their daily time
        commitment, create a learning path with 5-7 modules that progressively build skills.

        For each module give an id ("1", "2", ...), a title, a short description,
        a duration such as "2 weeks", four topics and a difficulty of
        beginner, intermediate or advanced.
        total_duration is expressed in weeks (e.g. "8 weeks") and estimated_completion
        in days (e.g. "56 days").
        """,
    )


def get_flashcard_agent() -> Agent[None, schemas.GeneratedFlashcards]:
    return Agent(
        get_ai_model("flashcards"),
        output_type=schemas.GeneratedFlashcards,
        model_settings=FLASHCARD_SETTINGS,
        instructions="""
        Create flashcards from the study content given by the user.
        Each flashcard should test understanding of one key concept.
        Create diverse questions covering definitions, concepts, applications and comparisons.

        front: a short standalone question or prompt that does not refer to "the text"
        back: a precise answer or explanation
        difficulty: easy, medium or hard
        id: "card-1", "card-2", ...
        """,
    )


def get_summary_agent() -> Agent[None, schemas.Summary]:
    return Agent(
        get_ai_model("summary"),
        output_type=schemas.Summary,
        model_settings=SUMMARY_SETTINGS,
        instructions="""
        Analyze and summarize the study content given by the user.

        Generate:
        1. A concise 2-3 paragraph summary
        2. Five key points
        3. Three main concepts
        4. The difficulty of the material: beginner, intermediate or advanced
        5. An estimated read time such as "5 minutes"
        """,
    )
