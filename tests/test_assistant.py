from __future__ import annotations

from datetime import datetime

from city_tutors_crm.assistant import AssistantSession, MockAssistant
from city_tutors_crm.storage import MemoryKeyValueStorage


def test_assistant_routes_by_keyword() -> None:
    assistant = MockAssistant()

    assert assistant.respond("Which BOARD terms end soon?").startswith("Board overview")
    assert assistant.respond("Show me recent donations").startswith("Donor tips")
    assert assistant.respond("What's on the calendar?").startswith("Calendar help")
    assert assistant.respond("How is the budget looking").startswith("Finance summary")
    assert assistant.respond("Any grant deadlines from a foundation?").startswith("Calendar help")
    assert assistant.respond("hello there").startswith("Hello!")


def test_first_matching_rule_wins() -> None:
    assistant = MockAssistant(
        rules=[
            (lambda text: "alpha" in text, "first"),
            (lambda text: "alpha" in text or "beta" in text, "second"),
        ]
    )

    assert assistant.respond("alpha beta") == "first"
    assert assistant.respond("beta") == "second"


def test_fallback_echoes_original_text() -> None:
    reply = MockAssistant().respond("Tell me about Tutoring Outcomes")

    assert 'I understand you\'re asking about "Tell me about Tutoring Outcomes"' in reply


def test_session_ignores_blank_messages() -> None:
    session = AssistantSession(MemoryKeyValueStorage())

    assert session.send("   ") is None
    assert session.messages() == []


def test_session_keeps_last_twenty_messages() -> None:
    storage = MemoryKeyValueStorage()
    session = AssistantSession(storage)
    now = datetime(2024, 2, 15, 9, 0)

    for index in range(12):
        session.send(f"question {index}", now=now)

    messages = AssistantSession(storage).messages()
    assert len(messages) == 20
    assert messages[0].role == "user"
    assert messages[0].content == "question 2"
    assert messages[-1].role == "assistant"

    session.clear()
    assert session.messages() == []


def test_keywords_match_at_word_starts_only() -> None:
    assistant = MockAssistant()

    assert assistant.respond("What is on my dashboard today?").startswith("I understand")
    assert assistant.respond("How do we prevent burnout?").startswith("I understand")
    assert assistant.respond("List the upcoming events").startswith("Calendar help")
