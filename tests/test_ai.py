"""Tests for AI study tools: MCQs, learning paths, flashcards and summaries."""

import random
from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from learnflow import schemas
from learnflow.config import Settings
from learnflow.constants import AI_CONTENT_CHAR_LIMIT
from learnflow.exceptions import InvalidUploadError, ServiceError, ValidationError
from learnflow.services.ai import fallbacks
from learnflow.services.ai.ai_model import build_model, get_ai_model
from learnflow.services.ai.ai_service import AIService, flashcard_count, mcq_prompt_from_file

FLASHCARD_CONTENT = (
    "TCP is a reliable, connection oriented transport protocol. "
    "UDP trades reliability for lower latency and is used for streaming. "
    "Short one."
)


def mock_agent(output: object = None, error: Exception | None = None) -> MagicMock:
    """Agent double whose ``run`` resolves to ``output`` or raises ``error``."""
    agent = MagicMock()
    agent.run = AsyncMock(return_value=MagicMock(output=output), side_effect=error)
    return agent


@pytest.fixture
def ai_settings() -> Settings:
    return Settings(AI_PROVIDER="openai", AI_MODEL_NAME="gpt-4o-mini", OPENAI_API_KEY="sk-test")


class TestTopicExtraction:
    """Unit tests for turning a request prompt into a topic."""

    def test_strips_filler_words(self) -> None:
        assert fallbacks.extract_topic("Make questions on Computer Networks") == (
            "computer networks"
        )

    def test_keeps_words_containing_filler(self) -> None:
        """Only whole filler words are removed."""
        assert fallbacks.extract_topic("Theory of Formation") == "theory of formation"

    def test_empty_topic_uses_default(self) -> None:
        assert fallbacks.extract_topic("generate questions about the") == fallbacks.DEFAULT_TOPIC

    def test_long_topic_truncated(self) -> None:
        topic = fallbacks.extract_topic("x" * 80)

        assert len(topic) == fallbacks.MAX_TOPIC_LENGTH
        assert topic.endswith("...")


class TestFallbackGenerators:
    """Unit tests for the local generators used without an AI provider."""

    def test_mcq_questions_cycle_patterns(self) -> None:
        questions = fallbacks.generate_mcq_questions(
            "Graph Theory", 12, rng=random.Random(42)  # noqa: S311
        )

        assert len(questions) == 12
        assert questions[0].question == "What is the primary purpose of graph theory?"
        assert questions[10].question == questions[0].question
        for question in questions:
            assert len(set(question.options)) == 4
            assert question.correct_answer in question.options

    def test_learning_path_has_five_modules(self) -> None:
        path = fallbacks.generate_learning_path("Rust", "intermediate")

        assert path.title == "Master Rust"
        assert path.difficulty == "intermediate"
        assert [m.id for m in path.modules] == ["1", "2", "3", "4", "5"]
        assert path.modules[0].title == "Introduction to Rust"
        assert path.prerequisites == ["Fundamentals of programming"]

    def test_flashcards_skip_short_sentences(self) -> None:
        cards = fallbacks.generate_flashcards(FLASHCARD_CONTENT)

        assert len(cards) == 2
        assert cards[0].back == "TCP is a reliable, connection oriented transport protocol"
        assert cards[0].front.startswith('What is the key concept in: "TCP is a reliable')
        assert [c.difficulty for c in cards] == ["easy", "medium"]

    def test_summary_truncates_content(self) -> None:
        summary = fallbacks.summarize("a" * 600)

        assert summary.summary == "a" * 500 + "..."
        assert len(summary.key_points) == 3


class TestPromptHelpers:
    """Unit tests for prompt construction helpers."""

    @pytest.mark.parametrize(
        ("length", "expected"), [(10, 5), (1000, 5), (2000, 10), (3000, 15), (50000, 15)]
    )
    def test_flashcard_count(self, length: int, expected: int) -> None:
        assert flashcard_count("x" * length) == expected

    def test_text_file_content_is_truncated(self) -> None:
        prompt = mcq_prompt_from_file("notes.txt", b"x" * 4000, 5)

        assert prompt.startswith("x" * AI_CONTENT_CHAR_LIMIT + "...")
        assert prompt.endswith("Generate 5 comprehensive MCQ questions based on this content.")

    def test_pdf_is_described_by_name(self) -> None:
        prompt = mcq_prompt_from_file("operating-systems_unit_1.pdf", b"%PDF-1.4", 3)

        assert '"operating systems unit 1"' in prompt
        assert "%PDF" not in prompt


class TestModelSelection:
    """Tests for choosing the model behind each kind of generation."""

    @pytest.fixture(autouse=True)
    def clear_model_cache(self) -> Iterator[None]:
        get_ai_model.cache_clear()
        yield
        get_ai_model.cache_clear()

    def test_kind_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        settings = Settings(
            AI_PROVIDER="openai",
            AI_MODEL_NAME="gpt-4o",
            AI_SUMMARY_MODEL_NAME="gpt-4o-mini",
            OPENAI_API_KEY="sk-test",
        )
        monkeypatch.setattr("learnflow.services.ai.ai_model.get_settings", lambda: settings)

        assert get_ai_model("summary").model_name == "gpt-4o-mini"
        assert get_ai_model("mcq").model_name == "gpt-4o"

    def test_anthropic_model(self) -> None:
        settings = Settings(
            AI_PROVIDER="anthropic", AI_MODEL_NAME="claude-haiku", ANTHROPIC_API_KEY="key"
        )

        assert build_model("claude-haiku", settings).model_name == "claude-haiku"

    def test_disabled_provider(self) -> None:
        with pytest.raises(ServiceError, match="AI generation is disabled"):
            build_model("gpt-4o", Settings())


class TestAIServiceWithProvider:
    """AIService with a configured provider; the agents are mocked."""

    @pytest.mark.asyncio
    async def test_uses_agent_output(self, ai_settings: Settings) -> None:
        output = schemas.MCQResponse(
            questions=[
                schemas.MCQQuestion(
                    question=f"Question {i}?",
                    options=["A", "B", "C", "D"],
                    correct_answer="A",
                    difficulty="easy",
                )
                for i in range(3)
            ]
        )
        agent = mock_agent(output)

        with patch("learnflow.services.ai.ai_service.get_mcq_agent", return_value=agent):
            result = await AIService(ai_settings).generate_mcq("Graphs", 2)

        assert [q.question for q in result.questions] == ["Question 0?", "Question 1?"]
        agent.run.assert_awaited_once()
        assert "Graphs" in agent.run.await_args.args[0]

    @pytest.mark.asyncio
    async def test_falls_back_when_agent_fails(self, ai_settings: Settings) -> None:
        agent = mock_agent(error=RuntimeError("provider unavailable"))

        with patch("learnflow.services.ai.ai_service.get_learning_path_agent", return_value=agent):
            result = await AIService(ai_settings).generate_learning_path(
                schemas.LearningPathGenerateRequest(topic="Kubernetes")
            )

        assert result.path.title == "Master Kubernetes"
        assert len(result.path.modules) == 5

    @pytest.mark.asyncio
    async def test_summary_from_agent(self, ai_settings: Settings) -> None:
        output = schemas.Summary(
            summary="Paging maps virtual pages to frames.",
            key_points=["Pages", "Frames"],
            concepts=["Paging"],
            difficulty="intermediate",
            estimated_read_time="2 min",
        )

        with patch(
            "learnflow.services.ai.ai_service.get_summary_agent", return_value=mock_agent(output)
        ):
            result = await AIService(ai_settings).summarize(
                schemas.SummarizeRequest(content="Paging divides memory into pages.")
            )

        assert result == output

    @pytest.mark.asyncio
    async def test_agent_not_used_when_disabled(self) -> None:
        agent = mock_agent()

        with patch("learnflow.services.ai.ai_service.get_flashcard_agent", return_value=agent):
            result = await AIService(Settings()).generate_flashcards(
                schemas.FlashcardGenerateRequest(content=FLASHCARD_CONTENT)
            )

        assert len(result.flashcards) == 2
        agent.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_file_validation(self, ai_settings: Settings) -> None:
        service = AIService(ai_settings)

        with pytest.raises(InvalidUploadError, match="Only PDF, DOC, DOCX and TXT"):
            await service.generate_mcq_from_file("malware.exe", b"MZ", 5)
        with pytest.raises(InvalidUploadError, match="empty"):
            await service.generate_mcq_from_file("notes.txt", b"", 5)

    @pytest.mark.asyncio
    async def test_blank_prompt(self, ai_settings: Settings) -> None:
        with pytest.raises(ValidationError, match="Prompt is required"):
            await AIService(ai_settings).generate_mcq("   ", 5)


class TestAIEndpoints:
    """Endpoint tests; no provider is configured so the local generators answer."""

    def test_generate_mcq(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/generate-mcq",
            json={"prompt": "Generate MCQ questions about Operating Systems", "num_questions": 3},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        questions = response.json()["questions"]
        assert len(questions) == 3
        assert "operating systems" in questions[0]["question"]
        for question in questions:
            assert question["correct_answer"] in question["options"]

    def test_generate_mcq_requires_auth(self, client: TestClient) -> None:
        response = client.post("/api/generate-mcq", json={"prompt": "Graphs"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_generate_mcq_blank_prompt(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/generate-mcq", json={"prompt": " "}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Prompt is required"

    def test_generate_mcq_too_many_questions(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/generate-mcq",
            json={"prompt": "Graphs", "num_questions": 21},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_generate_mcq_from_text_file(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/generate-mcq-from-file",
            data={"num_questions": "4"},
            files={"file": ("notes.txt", b"Deadlocks need mutual exclusion.", "text/plain")},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["questions"]) == 4

    def test_generate_mcq_from_unsupported_file(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/generate-mcq-from-file",
            files={"file": ("slides.pptx", b"PK", "application/octet-stream")},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Only PDF, DOC, DOCX and TXT files are allowed"

    def test_generate_learning_path(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/ai/generate-learning-path",
            json={"topic": "Machine Learning", "current_level": "beginner"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        path = response.json()["path"]
        assert path["title"] == "Master Machine Learning"
        assert len(path["modules"]) == 5

    def test_generate_learning_path_blank_topic(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/ai/generate-learning-path", json={"topic": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Topic is required"

    def test_generate_flashcards(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/ai/generate-flashcards",
            json={"content": FLASHCARD_CONTENT},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert [c["id"] for c in response.json()["flashcards"]] == ["card-0", "card-1"]

    def test_summarize(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/ai/summarize", json={"content": "Paging maps pages."}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["summary"] == "Paging maps pages...."

    def test_summarize_blank_content(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/ai/summarize", json={"content": ""}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Content is required"
