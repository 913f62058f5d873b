import asyncio

import httpx
import openai
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from puenjai.chains.persona_chain import PersonaChain, to_provider_error
from puenjai.config import Settings
from puenjai.utils.errors import AIProviderError

REQUEST = httpx.Request("POST", "https://example.test/v1/chat/completions")


@pytest.fixture
def settings():
    return Settings(api_key="test-key", database_url="sqlite+aiosqlite:///:memory:")


def raising(error):
    async def _call(prompt_value):
        raise error

    return RunnableLambda(_call)


def test_build_prompt_embeds_persona_and_inputs(settings):
    chain = PersonaChain(settings, llm=FakeListChatModel(responses=["x"]))
    prompt = chain.build_prompt("Ana", "I feel lost")

    assert 'Puen-Jai' in prompt
    assert "MUST STRICTLY MATCH the language" in prompt
    assert '- Name: "Ana"' in prompt
    assert '- Message: "I feel lost"' in prompt
    assert 'Write your comforting reply to "Ana".' in prompt


def test_build_prompt_passes_empty_input_through(settings):
    chain = PersonaChain(settings, llm=FakeListChatModel(responses=["x"]))
    prompt = chain.build_prompt("", "")
    assert '- Name: ""' in prompt


def test_generate_reply_returns_text(settings):
    chain = PersonaChain(settings, llm=FakeListChatModel(responses=["I am here for you, Ana."]))
    reply = asyncio.run(chain.generate_reply("Ana", "I feel lost"))
    assert reply == "I am here for you, Ana."


def test_generate_reply_sends_rendered_prompt(settings):
    seen = []

    async def capture(prompt_value):
        seen.append(prompt_value.to_string())
        return "ok"

    chain = PersonaChain(settings, llm=RunnableLambda(capture))
    assert asyncio.run(chain.generate_reply("Somchai", "ใจสลาย {braces}")) == "ok"
    assert len(seen) == 1
    assert '"Somchai"' in seen[0]
    assert "ใจสลาย {braces}" in seen[0]


def test_overload_maps_to_503(settings):
    original = openai.InternalServerError(
        "Service Unavailable", response=httpx.Response(503, request=REQUEST), body=None
    )
    chain = PersonaChain(settings, llm=raising(original))

    with pytest.raises(AIProviderError) as exc_info:
        asyncio.run(chain.generate_reply("Ana", "hi"))

    assert exc_info.value.status_code == 503
    assert exc_info.value.is_transient
    assert exc_info.value.__cause__ is original


def test_auth_error_keeps_status(settings):
    original = openai.AuthenticationError(
        "invalid api key", response=httpx.Response(401, request=REQUEST), body=None
    )
    chain = PersonaChain(settings, llm=raising(original))

    with pytest.raises(AIProviderError) as exc_info:
        asyncio.run(chain.generate_reply("Ana", "hi"))

    assert exc_info.value.status_code == 401
    assert not exc_info.value.is_transient


def test_connection_error_has_no_status():
    error = to_provider_error(openai.APIConnectionError(request=REQUEST))
    assert error.status_code is None
    assert not error.is_transient


def test_default_llm_disables_sdk_retries(settings):
    chain = PersonaChain(settings)
    assert chain.llm.max_retries == 0
    assert chain.llm.model_name == "gemini-1.5-flash"
