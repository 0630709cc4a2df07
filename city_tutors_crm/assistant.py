"""Keyword-matched placeholder assistant with a persisted transcript."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Callable

from . import config
from .models import ChatMessage
from .storage import JsonRepository, KeyValueStorage, Repository

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


def _mentions(*phrases: str) -> Predicate:
    patterns = [re.compile(rf"\b{re.escape(phrase)}") for phrase in phrases]

    def predicate(text: str) -> bool:
        return any(pattern.search(text) for pattern in patterns)

    return predicate


DEFAULT_RULES: list[tuple[Predicate, str]] = [
    (
        _mentions("board", "trustee", "seat"),
        "Board overview:\n"
        "- Open the Board tab to see the boardroom seat layout.\n"
        "- Terms expiring within 6 months are counted at the top of the page.\n"
        "- Select a member to review committees, giving, and narrative notes.",
    ),
    (
        _mentions("donor", "donation", "gift", "giving"),
        "Donor tips:\n"
        "- Search the Donors tab by name or organization.\n"
        "- Donors who gave within 90 days are counted as recent.\n"
        "- Add a note after every conversation so the history stays complete.",
    ),
    (
        _mentions("event", "calendar", "meeting", "schedule", "deadline"),
        "Calendar help:\n"
        "- The Calendar tab shows up to 2 events per day with a +N more marker.\n"
        "- Upcoming events list the next 8 scheduled items, excluding cancelled ones.\n"
        "- Overdue counts scheduled deadlines that have already passed.",
    ),
    (
        _mentions("budget", "finance", "income", "expense", "revenue", "transaction"),
        "Finance summary options:\n"
        "- Switch the Finances tab between monthly and yearly views.\n"
        "- Income, expenses, and net income compare against the previous period.\n"
        "- Export the filtered transactions to CSV for your accountant.",
    ),
    (
        _mentions("grant", "foundation"),
        "Grant reminders:\n"
        "- Track grant deadlines as calendar events of type 'deadline'.\n"
        "- Record awarded grants as income under the Donations category.",
    ),
    (
        _mentions("hello", "good morning", "good afternoon"),
        "Hello! I can help with donors, board members, the calendar, and finances.\n"
        "Try asking about upcoming events or this month's income.",
    ),
    (
        _mentions("help", "what can you do"),
        "I can answer questions about:\n"
        "- Board members and terms\n"
        "- Donors and giving history\n"
        "- Calendar events and deadlines\n"
        "- Budgets, income, and expenses",
    ),
]


def fallback_response(query: str) -> str:
    return (
        f'I understand you\'re asking about "{query}".\n'
        "Full AI functionality is coming soon. In the meantime, try asking about "
        "donors, the board, events, or finances."
    )


class MockAssistant:
    """Evaluate (predicate, response) rules top to bottom; the first match wins."""

    def __init__(self, rules: list[tuple[Predicate, str]] | None = None) -> None:
        self.rules = list(DEFAULT_RULES if rules is None else rules)

    def respond(self, text: str) -> str:
        lowered = text.lower()
        for predicate, response in self.rules:
            if predicate(lowered):
                return response
        return fallback_response(text)


class AssistantSession:
    def __init__(
        self,
        storage: KeyValueStorage,
        assistant: MockAssistant | None = None,
        limit: int = config.ASSISTANT_TRANSCRIPT_LIMIT,
    ) -> None:
        self.assistant = assistant or MockAssistant()
        self.limit = limit
        self.repository: Repository[ChatMessage] = JsonRepository(
            storage,
            config.ASSISTANT_MESSAGES_KEY,
            ChatMessage.from_dict,
            ChatMessage.to_dict,
        )

    def messages(self) -> list[ChatMessage]:
        return self.repository.load()

    def send(self, text: str, now: datetime | None = None) -> ChatMessage | None:
        if not text.strip():
            return None

        timestamp = now or datetime.now()
        reply = ChatMessage(
            role="assistant",
            content=self.assistant.respond(text),
            timestamp=timestamp,
        )
        transcript = [
            *self.messages(),
            ChatMessage(role="user", content=text, timestamp=timestamp),
            reply,
        ]
        self.repository.save_all(transcript[-self.limit :])
        logger.debug("Assistant replied to %r.", text)
        return reply

    def clear(self) -> None:
        self.repository.save_all([])
