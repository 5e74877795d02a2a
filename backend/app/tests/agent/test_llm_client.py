from unittest.mock import MagicMock, patch

import pytest

from app.agent.llm_client import LLMClient
from app.tests.llm_stub import make_openai_client


@pytest.mark.asyncio
async def test_llm_client_returns_stripped_text():
    mock_client_instance, mock_completions = make_openai_client("\n  Node A -> Node B  \n")

    with patch("app.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance):
        with patch("app.agent.llm_client.settings.LLM_API_KEY", "dummy_key"):
            client = LLMClient(model_name="test-model")

            result = await client.generate_text(
                system_prompt="You are a helpful assistant.",
                user_prompt="Describe the network",
                temperature=0.7,
                max_tokens=6000,
            )

    assert result == "Node A -> Node B"
    mock_completions.create.assert_called_once()
    kwargs = mock_completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["temperature"] == 0.7
    assert kwargs["max_tokens"] == 6000
    assert kwargs["messages"] == [
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "Describe the network"},
    ]


def test_llm_client_disables_transport_retries():
    with patch("app.agent.llm_client.AsyncOpenAI") as mock_openai:
        LLMClient(model_name="test-model", api_key="dummy_key", base_url="http://llm.local/v1")

    mock_openai.assert_called_once_with(
        base_url="http://llm.local/v1",
        api_key="dummy_key",
        max_retries=0,
    )


def test_chat_completion_kwargs_for_gpt5_models():
    with patch("app.agent.llm_client.AsyncOpenAI"):
        client = LLMClient(model_name="gpt-5-mini", api_key="dummy_key")

    assert client._chat_completion_kwargs(temperature=0.3, max_tokens=1000) == {"max_completion_tokens": 1000}
    assert client._chat_completion_kwargs(temperature=None, max_tokens=None) == {}


@pytest.mark.asyncio
async def test_llm_client_raises_when_provider_returns_no_choices():
    mock_client_instance, mock_completions = make_openai_client()
    empty_response = MagicMock()
    empty_response.choices = []
    mock_completions.create.side_effect = None
    mock_completions.create.return_value = empty_response

    with patch("app.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance):
        client = LLMClient(model_name="test-model", api_key="dummy_key")
        with pytest.raises(ValueError, match="returned no output"):
            await client.generate_text(system_prompt="", user_prompt="hello")

    # Empty system prompts are not sent.
    assert mock_completions.create.call_args.kwargs["messages"] == [{"role": "user", "content": "hello"}]


@pytest.mark.asyncio
async def test_llm_client_does_not_retry_provider_errors():
    mock_client_instance, mock_completions = make_openai_client(RuntimeError("quota exceeded"))

    with patch("app.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance):
        client = LLMClient(model_name="test-model", api_key="dummy_key")
        with pytest.raises(RuntimeError, match="quota exceeded"):
            await client.generate_text(system_prompt="sys", user_prompt="hello")

    assert mock_completions.create.await_count == 1
