"""Tests for prompt construction, orchestration and hobby parsing."""

from unittest.mock import MagicMock

import pytest

from unplug.assistant.orchestrator import PromptOrchestrator, parse_hobby_suggestions
from unplug.assistant.prompts import DEFAULT_INTERESTS, UseCase, build_request
from unplug.groq.errors import EmptyResult


class TestBuildRequest:
    def test_break_urge_parameters(self):
        request = build_request(UseCase.BREAK_URGE)

        assert request.temperature == 0.7
        assert request.max_tokens == 150
        assert "breaking digital habits" in request.system_prompt
        assert "urge to start gaming" in request.user_prompt

    def test_suggest_hobby_parameters(self):
        request = build_request(UseCase.SUGGEST_HOBBY, "strategy, teamwork")

        assert request.temperature == 0.8
        assert request.max_tokens == 300
        assert "numbered list" in request.system_prompt
        assert "The things I like about games are strategy, teamwork." in request.user_prompt

    @pytest.mark.parametrize("interests", ["", "   ", "\n"])
    def test_blank_interests_use_fallback(self, interests):
        request = build_request(UseCase.SUGGEST_HOBBY, interests)

        assert DEFAULT_INTERESTS in request.user_prompt

    def test_braces_in_interests_are_kept(self):
        request = build_request(UseCase.SUGGEST_HOBBY, "{loot} boxes")

        assert "{loot} boxes" in request.user_prompt

    def test_request_is_immutable(self):
        request = build_request(UseCase.BREAK_URGE)

        with pytest.raises(AttributeError):
            request.temperature = 1.0


class TestParseHobbySuggestions:
    def test_numbered_list_with_blank_line(self):
        text = "1. Try pottery\n2. Go hiking\n\n3. Learn guitar"

        assert parse_hobby_suggestions(text) == ["Try pottery", "Go hiking", "Learn guitar"]

    def test_no_markers(self):
        assert parse_hobby_suggestions("Try pottery\nGo hiking") == ["Try pottery", "Go hiking"]

    def test_dash_marker(self):
        assert parse_hobby_suggestions("- Try pottery") == ["Try pottery"]

    def test_mixed_markers_and_whitespace(self):
        text = "  1.  Try pottery  \r\n- Go hiking\n\n\n10. Learn guitar\n"

        assert parse_hobby_suggestions(text) == ["Try pottery", "Go hiking", "Learn guitar"]

    def test_intro_line_is_kept(self):
        text = "Here are some quests:\n1. Bouldering"

        assert parse_hobby_suggestions(text) == ["Here are some quests:", "Bouldering"]

    def test_bare_markers_are_dropped(self):
        assert parse_hobby_suggestions("1.\n-\n2. Chess club") == ["Chess club"]

    def test_empty_text(self):
        assert parse_hobby_suggestions("") == []


class TestPromptOrchestrator:
    def test_break_urge_returns_text_only(self):
        client = MagicMock()
        client.chat.return_value = "1. Go for a walk"

        result = PromptOrchestrator(client).complete(UseCase.BREAK_URGE)

        assert result.text == "1. Go for a walk"
        assert result.suggestions == []
        request = client.chat.call_args[0][0]
        assert request.temperature == 0.7

    def test_suggest_hobby_parses_list(self):
        client = MagicMock()
        client.chat.return_value = "1. Chess\n2. Climbing"

        result = PromptOrchestrator(client).complete(UseCase.SUGGEST_HOBBY, "puzzles")

        assert result.suggestions == ["Chess", "Climbing"]
        request = client.chat.call_args[0][0]
        assert "puzzles" in request.user_prompt

    def test_failures_propagate(self):
        client = MagicMock()
        client.chat.side_effect = EmptyResult()

        with pytest.raises(EmptyResult):
            PromptOrchestrator(client).complete(UseCase.BREAK_URGE)

        assert client.chat.call_count == 1
