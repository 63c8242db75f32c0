"""Chat session for one chapter."""

import logging
from dataclasses import dataclass
from typing import Protocol

from capstone.companion.prompts import quick_suggestions, welcome_message
from capstone.companion.sanitize import extract_insertable_content, has_apply_instruction
from capstone.errors import CompanionError, log_error_with_context, notice_for_error
from capstone.state.enums import MessageRole
from capstone.state.models import ChatMessage, Notice

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I'm sorry, I'm having trouble responding right now. Please try again in a moment."
)


class Companion(Protocol):
    name: str

    def reply(self, message: str, chapter_number: int, chapter_title: str) -> str: ...


@dataclass
class CompanionTurn:
    """Outcome of one send: the AI message appended, and a notice on failure."""

    reply: ChatMessage
    notice: Notice | None = None

    @property
    def failed(self) -> bool:
        return self.notice is not None


class CompanionSession:
    """Conversation log with the companion for one chapter.

    Starts with the chapter's welcome message. Each accepted send appends
    the user message and exactly one AI message, whether the strategy
    replied or failed.
    """

    def __init__(self, chapter_number: int, chapter_title: str, companion: Companion | None = None):
        if companion is None:
            from capstone.companion import create_companion
            companion = create_companion()

        self.chapter_number = chapter_number
        self.chapter_title = chapter_title
        self.companion = companion
        self.is_loading = False
        self.messages: list[ChatMessage] = [
            ChatMessage(role=MessageRole.AI, content=welcome_message(chapter_number))
        ]

    def suggestions(self) -> list[str]:
        return quick_suggestions(self.chapter_number)

    def send(self, text: str) -> CompanionTurn | None:
        """Send a user message and record the reply.

        Returns None without touching the log when the text is blank or a
        request is already in flight.
        """
        if not text.strip() or self.is_loading:
            return None

        self.messages.append(ChatMessage(role=MessageRole.USER, content=text))
        self.is_loading = True
        try:
            content = self.companion.reply(text, self.chapter_number, self.chapter_title)
        except CompanionError as e:
            log_error_with_context(
                e,
                node="companion",
                context={"strategy": self.companion.name, "chapter": self.chapter_number},
            )
            fallback = ChatMessage(role=MessageRole.AI, content=FALLBACK_REPLY)
            self.messages.append(fallback)
            return CompanionTurn(reply=fallback, notice=notice_for_error(e))
        finally:
            self.is_loading = False

        reply = ChatMessage(
            role=MessageRole.AI,
            content=content,
            insertable=has_apply_instruction(content),
        )
        self.messages.append(reply)
        return CompanionTurn(reply=reply)

    def latest_insertable(self) -> ChatMessage | None:
        for message in reversed(self.messages):
            if message.insertable:
                return message
        return None

    def insertable_content(self, message: ChatMessage | None = None) -> str | None:
        """Plain text of ``message``, or of the latest insertable reply."""
        message = message or self.latest_insertable()
        if message is None:
            return None
        return extract_insertable_content(message.content)
