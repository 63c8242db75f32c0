"""Unit tests for the Flask server endpoints."""

from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from capstone import server
from capstone.errors import ConfigurationError


class UpstreamError(Exception):
    """Provider error carrying an HTTP status code."""

    def __init__(self, message, status_code):
        super().__init__(message)
        self.status_code = status_code


@pytest.fixture
def client():
    server.app.config["TESTING"] = True
    with server.app.test_client() as client:
        yield client


@pytest.fixture
def chat_model(monkeypatch):
    model = MagicMock()
    model.invoke.return_value = AIMessage(content="Here is your problem statement.")
    monkeypatch.setattr(server, "get_chat_model", lambda: model)
    return model


def _chat_body(**overrides):
    body = {"message": "Write a problem statement", "chapterNumber": 1, "chapterTitle": "Introduction"}
    body.update(overrides)
    return body


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok"}


class TestChatEndpoint:
    """Test POST /api/chat."""

    def test_success(self, client, chat_model):
        response = client.post("/api/chat", json=_chat_body())

        assert response.status_code == 200
        assert response.get_json() == {"response": "Here is your problem statement."}

        messages = chat_model.invoke.call_args[0][0]
        assert isinstance(messages[0], SystemMessage)
        assert "Chapter 1 (Introduction)" in messages[0].content
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "Write a problem statement"

    def test_message_too_long_never_reaches_model(self, client, chat_model):
        response = client.post("/api/chat", json=_chat_body(message="x" * 2001))
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid input"
        chat_model.invoke.assert_not_called()

    @pytest.mark.parametrize("overrides", [
        {"message": "   "},
        {"chapterNumber": 0},
        {"chapterNumber": 6},
        {"chapterNumber": "1"},
        {"chapterTitle": ""},
        {"chapterTitle": "t" * 201},
    ])
    def test_invalid_fields(self, client, chat_model, overrides):
        response = client.post("/api/chat", json=_chat_body(**overrides))
        assert response.status_code == 400
        assert response.get_json()["details"]
        chat_model.invoke.assert_not_called()

    def test_non_object_body(self, client, chat_model):
        response = client.post("/api/chat", json=["not", "an", "object"])
        assert response.status_code == 400

    def test_message_is_trimmed(self, client, chat_model):
        client.post("/api/chat", json=_chat_body(message="  Help me  "))
        assert chat_model.invoke.call_args[0][0][1].content == "Help me"

    @pytest.mark.parametrize("status,message", [
        (429, "Rate limit exceeded. Please try again in a moment."),
        (402, "AI credits depleted. Please add credits to continue."),
    ])
    def test_upstream_status_mapped(self, client, chat_model, status, message):
        chat_model.invoke.side_effect = UpstreamError("upstream", status)
        response = client.post("/api/chat", json=_chat_body())
        assert response.status_code == status
        assert response.get_json() == {"error": message}

    def test_upstream_other_error(self, client, chat_model):
        chat_model.invoke.side_effect = RuntimeError("provider exploded")
        response = client.post("/api/chat", json=_chat_body())
        assert response.status_code == 500
        assert response.get_json() == {"error": "provider exploded"}

    def test_empty_reply(self, client, chat_model):
        chat_model.invoke.return_value = AIMessage(content="   ")
        response = client.post("/api/chat", json=_chat_body())
        assert response.status_code == 500
        assert response.get_json() == {"error": "No response from AI"}

    def test_missing_api_key(self, client, monkeypatch):
        def raise_config():
            raise ConfigurationError("ANTHROPIC_API_KEY is not configured", setting="ANTHROPIC_API_KEY")

        monkeypatch.setattr(server, "get_chat_model", raise_config)
        response = client.post("/api/chat", json=_chat_body())
        assert response.status_code == 500
        assert response.get_json() == {"error": "ANTHROPIC_API_KEY is not configured"}


class TestTitlesEndpoint:
    """Test POST /api/titles."""

    def test_titles(self, client, form_data):
        response = client.post("/api/titles", json=form_data)
        titles = response.get_json()["titles"]
        assert response.status_code == 200
        assert len(titles) == 5
        assert all("Machine Learning in Healthcare" in t for t in titles)

    def test_missing_topic(self, client):
        response = client.post("/api/titles", json={"field": "business"})
        assert response.status_code == 400
        assert response.get_json()["notice"]["title"] == "Missing Information"


class TestProjectsEndpoint:
    """Test POST /api/projects."""

    def test_project_for_chosen_title(self, client, form_data):
        response = client.post("/api/projects", json={**form_data, "title": "Chosen Title"})
        body = response.get_json()

        assert response.status_code == 200
        assert body["project"]["main_title"] == "Chosen Title"
        assert [c["number"] for c in body["project"]["chapters"]] == [1, 2, 3, 4, 5]
        assert len(body["titleOptions"]) == 5
        assert body["outline"].startswith("Chosen Title\n\nChapter 1: ")

    def test_missing_field(self, client):
        response = client.post("/api/projects", json={"topic": "Remote Work"})
        assert response.status_code == 400
        assert response.get_json()["notice"]["variant"] == "destructive"


class TestExportEndpoint:
    """Test POST /api/export."""

    def test_docx_from_project(self, client, sample_project):
        response = client.post("/api/export", json={"project": sample_project.model_dump(mode="json")})
        assert response.status_code == 200
        assert response.data[:2] == b"PK"
        assert response.mimetype.endswith("wordprocessingml.document")
        assert "Development_of_an_Intelligent" in response.headers["Content-Disposition"]

    def test_text_from_chapters(self, client, sample_project):
        chapters = server.DocumentEditor(sample_project).chapters
        body = {"title": "My Title", "chapters": [c.model_dump(mode="json") for c in chapters]}
        response = client.post("/api/export?format=txt", json=body)
        assert response.status_code == 200
        assert response.data.startswith(b"My Title\n========\n\n")

    def test_invalid_body(self, client):
        response = client.post("/api/export", json={})
        assert response.status_code == 400
        assert response.get_json()["notice"]["title"] == "Export Failed"

    def test_unknown_format(self, client, sample_project):
        response = client.post(
            "/api/export?format=pdf",
            json={"project": sample_project.model_dump(mode="json")},
        )
        assert response.status_code == 500
        assert response.get_json()["notice"]["title"] == "Export Failed"
