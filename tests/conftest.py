"""pytest 全局 fixtures: 测试环境隔离"""

import pytest


class FakeChatClient:
    """Returns canned completions and records the prompts it was given."""

    model = "fake-model"

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def complete_json(self, system, user):
        self.calls.append((system, user))
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """默认禁用真实 LLM，并重置所有单例，确保测试不依赖外部服务"""
    for name in (
        "DASHSCOPE_API_KEY",
        "OPENAI_API_KEY",
        "LLM_API_KEY",
        "LLM_MODEL",
        "LLM_BASE_URL",
        "CLASS_MULTIPLIERS",
        "SEED_DATA_FILE",
        "LOCATION_PROVIDER",
        "LOCATION_SUGGESTION_LIMIT",
        "LLM_TIMEOUT_SECONDS",
        "CORS_ORIGINS",
        "ENABLE_DOCS",
    ):
        monkeypatch.delenv(name, raising=False)

    from travel_search.adapters.tool_factory import reset_location_provider
    from travel_search.infrastructure.llm_factory import reset_llm
    from travel_search.persistence.repository import reset_repository

    reset_llm()
    reset_repository()
    reset_location_provider()
    yield
    reset_llm()
    reset_repository()
    reset_location_provider()


@pytest.fixture
def fake_llm():
    """Install a FakeChatClient as the active LLM; tests set ``.content``/``.error``."""
    from travel_search.infrastructure.llm_factory import set_llm

    client = FakeChatClient()
    set_llm(client)
    return client
