import logging
from types import SimpleNamespace

import pytest

from travel_search.config.settings import resolve_llm_provider
from travel_search.infrastructure import llm_factory


def test_no_key_means_no_client():
    assert llm_factory.get_llm() is None
    assert llm_factory.is_llm_available() is False


def test_openai_key_builds_json_client(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key-0000")
    client = llm_factory.get_llm()
    assert isinstance(client, llm_factory.OpenAIChatClient)
    assert client.model == "gpt-4o"
    assert llm_factory.get_llm() is client


def test_dashscope_takes_priority(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai-0000")
    monkeypatch.setenv("DASHSCOPE_API_KEY", "sk-dashscope-0000")
    monkeypatch.setenv("LLM_MODEL", "qwen-max")
    api_key, base_url, model = llm_factory._resolve_config()
    assert api_key == "sk-dashscope-0000"
    assert "dashscope" in base_url
    assert model == "qwen-max"


def test_set_llm_overrides_resolution(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key-0000")
    sentinel = object()
    llm_factory.set_llm(sentinel)
    assert llm_factory.get_llm() is sentinel
    llm_factory.reset_llm()
    assert llm_factory.get_llm() is not sentinel


class _FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def test_complete_json_requests_json_mode(monkeypatch):
    client = llm_factory.OpenAIChatClient("sk-test-key-0000", "https://example.invalid/v1", "gpt-4o", timeout=5)
    completions = _FakeCompletions('{"ok": true}')
    monkeypatch.setattr(client.client.chat, "completions", completions)

    assert client.complete_json("system text", "user text") == '{"ok": true}'
    assert completions.kwargs["response_format"] == {"type": "json_object"}
    assert [m["role"] for m in completions.kwargs["messages"]] == ["system", "user"]


def test_timeout_env_is_applied(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key-0000")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12.5")
    assert llm_factory.get_llm().client.timeout == 12.5


@pytest.mark.parametrize("raw", ["thirty", "0", "-5"])
def test_bad_timeout_falls_back_to_default(monkeypatch, caplog, raw):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key-0000")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", raw)
    with caplog.at_level(logging.WARNING, logger="travel-search.config"):
        client = llm_factory.get_llm()
    assert isinstance(client, llm_factory.OpenAIChatClient)
    assert client.client.timeout == 30.0
    assert "LLM_TIMEOUT_SECONDS" in caplog.text


def test_whitespace_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "   ")
    assert llm_factory.get_llm() is None
    assert resolve_llm_provider() == "disabled"


def test_key_is_stripped(monkeypatch):
    monkeypatch.setenv("LLM_API_KEY", "  sk-padded-0000  ")
    api_key, _, _ = llm_factory._resolve_config()
    assert api_key == "sk-padded-0000"
