"""Tests for the OpenAI suggestion adapter."""

import asyncio
import json

import pytest

from ingredient_substitutions.adapters.openai_suggestion_client import (
    OpenAISuggestionClient,
)


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def _suggest(client: OpenAISuggestionClient) -> dict[str, object]:
    return asyncio.run(
        client.suggest(
            model="gpt-4o-mini",
            store=False,
            instructions="Be concise",
            prompt='{"ingredient": "butter"}',
            schema={"type": "object"},
        )
    )


def test_openai_client_parses_output() -> None:
    fake = _FakeOpenAI(json.dumps({"query": "butter", "substitutions": []}))
    client = OpenAISuggestionClient(client=fake)

    result = _suggest(client)

    assert result == {"query": "butter", "substitutions": []}
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["text"]["format"]["type"] == "json_schema"
    assert payload["text"]["format"]["strict"] is True
    assert payload["store"] is False


def test_openai_client_rejects_empty_output() -> None:
    client = OpenAISuggestionClient(client=_FakeOpenAI(""))

    with pytest.raises(RuntimeError):
        _suggest(client)
