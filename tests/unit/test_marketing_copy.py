# =============================================================================
# tests/unit/test_marketing_copy.py
# Unit Tests for the marketing caption generator
# =============================================================================

from types import SimpleNamespace
from unittest.mock import MagicMock

from fuego_core.ai import TONES, generate_marketing_copy
from fuego_core.ai.marketing_copy import (
    MARKETING_EMPTY_MESSAGE,
    MARKETING_ERROR_MESSAGE,
    build_marketing_prompt,
)
from fuego_core.data.menu import MENU_HIGHLIGHTS, find_menu_item


def _client_returning(text):
    client = MagicMock()
    message = SimpleNamespace(content=text)
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=message)]
    )
    return client


class TestPrompt:
    def test_prompt_mentions_dish_and_tone(self):
        prompt = build_marketing_prompt("Tomahawk", "Corte nobre", "urgente")

        assert "Prato: Tomahawk" in prompt
        assert "Descrição: Corte nobre" in prompt
        assert "Tom de voz: urgente" in prompt


class TestGenerateMarketingCopy:
    """Test caption generation and failure messages"""

    def test_returns_generated_text(self):
        client = _client_returning("  🔥 Reserve já!  ")

        text = generate_marketing_copy("Tomahawk", "Corte nobre", "formal", client=client)

        assert text == "🔥 Reserve já!"
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"][1]["content"].endswith("Não use hashtags em excesso.")

    def test_unknown_tone_falls_back(self):
        client = _client_returning("ok")

        generate_marketing_copy("Tomahawk", "Corte nobre", "sarcastico", client=client)

        prompt = client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
        assert "Tom de voz: divertido" in prompt

    def test_empty_answer(self):
        client = _client_returning("   ")
        assert generate_marketing_copy("A", "B", "formal", client=client) == MARKETING_EMPTY_MESSAGE

    def test_api_error(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = RuntimeError("quota exceeded")

        assert generate_marketing_copy("A", "B", "formal", client=client) == MARKETING_ERROR_MESSAGE

    def test_missing_key(self):
        assert generate_marketing_copy("A", "B", "formal", api_key="") == MARKETING_ERROR_MESSAGE

    def test_tones(self):
        assert TONES == ("formal", "divertido", "urgente")


class TestMenu:
    def test_lookup(self):
        first = MENU_HIGHLIGHTS[0]
        assert find_menu_item(first.id) is first
        assert find_menu_item(999) is None
