"""Unit tests for the per-chapter companion session."""

import pytest

from capstone.companion import APPLY_INSTRUCTION, CompanionSession, LocalCompanion
from capstone.companion.session import FALLBACK_REPLY
from capstone.errors import CompanionError, QuotaExceededError, RateLimitError
from capstone.state.enums import MessageRole


class StubCompanion:
    """Companion returning a fixed reply or raising a fixed error."""

    name = "stub"

    def __init__(self, reply="A reply.", error=None):
        self._reply = reply
        self._error = error
        self.calls = []

    def reply(self, message, chapter_number, chapter_title):
        self.calls.append((message, chapter_number, chapter_title))
        if self._error is not None:
            raise self._error
        return self._reply


class TestCompanionSession:
    """Test CompanionSession.send and the conversation log."""

    def test_starts_with_welcome(self):
        session = CompanionSession(1, "Introduction", companion=StubCompanion())
        assert len(session.messages) == 1
        assert session.messages[0].role == MessageRole.AI
        assert "Chapter 1: Introduction" in session.messages[0].content
        assert len(session.suggestions()) == 4

    def test_successful_send_appends_two(self):
        stub = StubCompanion()
        session = CompanionSession(2, "Literature Review", companion=stub)
        turn = session.send("Help me")

        assert not turn.failed
        assert [m.role for m in session.messages[1:]] == [MessageRole.USER, MessageRole.AI]
        assert session.messages[-1].content == "A reply."
        assert stub.calls == [("Help me", 2, "Literature Review")]
        assert session.is_loading is False

    @pytest.mark.parametrize("error,title", [
        (RateLimitError(), "Rate Limit Reached"),
        (QuotaExceededError(), "AI Credits Depleted"),
        (CompanionError("boom"), "AI Companion Error"),
    ])
    def test_failure_appends_fallback_and_notice(self, error, title):
        """A failed reply still grows the log by exactly two messages."""
        session = CompanionSession(1, "Introduction", companion=StubCompanion(error=error))
        before = len(session.messages)
        turn = session.send("Help me")

        assert len(session.messages) == before + 2
        assert turn.failed
        assert turn.notice.title == title
        assert session.messages[-1].content == FALLBACK_REPLY
        assert session.messages[-1].insertable is False
        assert session.is_loading is False

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input_ignored(self, text):
        stub = StubCompanion()
        session = CompanionSession(1, "Introduction", companion=stub)
        assert session.send(text) is None
        assert len(session.messages) == 1
        assert stub.calls == []

    def test_send_ignored_while_loading(self):
        session = CompanionSession(1, "Introduction", companion=StubCompanion())
        session.is_loading = True
        assert session.send("Help me") is None
        assert len(session.messages) == 1

    def test_unexpected_errors_propagate(self):
        session = CompanionSession(1, "Introduction", companion=StubCompanion(error=RuntimeError("bug")))
        with pytest.raises(RuntimeError):
            session.send("Help me")
        assert session.is_loading is False


class TestInsertableContent:
    """Test insertable replies."""

    def test_insertable_flag(self):
        stub = StubCompanion(reply=f"Generated text.\n\n{APPLY_INSTRUCTION}")
        session = CompanionSession(1, "Introduction", companion=stub)
        turn = session.send("write it")
        assert turn.reply.insertable
        assert session.latest_insertable() is turn.reply

    def test_plain_reply_not_insertable(self):
        session = CompanionSession(1, "Introduction", companion=StubCompanion())
        session.send("hi")
        assert session.latest_insertable() is None
        assert session.insertable_content() is None

    def test_insertable_content_from_local_companion(self):
        session = CompanionSession(3, "Methodology", companion=LocalCompanion())
        session.send("Choose research methodology")
        content = session.insertable_content()
        assert content.startswith("Choose methodology based on:")
        assert "Apply Content" not in content
