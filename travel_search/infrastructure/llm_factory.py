"""LLM 工厂：根据环境变量决定是否启用 LLM

Supported keys, in priority order:
  DASHSCOPE_API_KEY  → DashScope OpenAI-compatible endpoint
  OPENAI_API_KEY     → OpenAI
  LLM_API_KEY        → any OpenAI-compatible endpoint (set LLM_BASE_URL)

Optional:
  LLM_MODEL           model name, defaults per provider
  LLM_BASE_URL        custom base_url
  LLM_TIMEOUT_SECONDS per-call timeout
"""

from __future__ import annotations

import os
from typing import Optional, Protocol

from openai import OpenAI

from travel_search.config.settings import is_configured, llm_timeout_seconds

_DASHSCOPE_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
_DASHSCOPE_DEFAULT_MODEL = "qwen-plus"
_OPENAI_BASE_URL = "https://api.openai.com/v1"
_OPENAI_DEFAULT_MODEL = "gpt-4o"


def _resolve_config() -> tuple[str, str, str] | None:
    """返回 (api_key, base_url, model) 或 None。"""
    ds_key = os.getenv("DASHSCOPE_API_KEY")
    if is_configured(ds_key):
        return (
            ds_key.strip(),
            os.getenv("LLM_BASE_URL", _DASHSCOPE_BASE_URL),
            os.getenv("LLM_MODEL", _DASHSCOPE_DEFAULT_MODEL),
        )

    oai_key = os.getenv("OPENAI_API_KEY")
    if is_configured(oai_key):
        return (
            oai_key.strip(),
            os.getenv("LLM_BASE_URL", _OPENAI_BASE_URL),
            os.getenv("LLM_MODEL", _OPENAI_DEFAULT_MODEL),
        )

    llm_key = os.getenv("LLM_API_KEY")
    if is_configured(llm_key):
        return (
            llm_key.strip(),
            os.getenv("LLM_BASE_URL", _OPENAI_BASE_URL),
            os.getenv("LLM_MODEL", _OPENAI_DEFAULT_MODEL),
        )

    return None


class ChatClient(Protocol):
    model: str

    def complete_json(self, system: str, user: str) -> str: ...


class OpenAIChatClient:
    """JSON-mode chat completion over the OpenAI SDK."""

    def __init__(self, api_key: str, base_url: str, model: str, timeout: float):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=1)
        self.model = model

    def complete_json(self, system: str, user: str) -> str:
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            response_format={"type": "json_object"},
        )
        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""


_llm_instance: Optional[ChatClient] = None
_llm_resolved: bool = False  # 区分 None（无 key）和未初始化


def get_llm() -> Optional[ChatClient]:
    """Build the chat client once; ``None`` when no key is configured."""
    global _llm_instance, _llm_resolved
    if _llm_resolved:
        return _llm_instance

    cfg = _resolve_config()
    if cfg is None:
        _llm_instance = None
    else:
        api_key, base_url, model = cfg
        _llm_instance = OpenAIChatClient(api_key, base_url, model, timeout=llm_timeout_seconds())

    _llm_resolved = True
    return _llm_instance


def set_llm(client: Optional[ChatClient]) -> None:
    """Inject a client directly (tests, alternative providers)."""
    global _llm_instance, _llm_resolved
    _llm_instance = client
    _llm_resolved = True


def reset_llm() -> None:
    """重置 LLM 单例（测试用）"""
    global _llm_instance, _llm_resolved
    _llm_instance = None
    _llm_resolved = False


def is_llm_available() -> bool:
    return _resolve_config() is not None
