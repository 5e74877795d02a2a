from unittest.mock import AsyncMock, MagicMock


def make_completion(content: str) -> MagicMock:
    # Mock response object mapping the OpenAI API response structure
    mock_message = MagicMock()
    mock_message.content = content

    mock_choice = MagicMock()
    mock_choice.message = mock_message

    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


def make_openai_client(*replies) -> tuple[AsyncMock, MagicMock]:
    """
    Build a stand-in AsyncOpenAI instance whose chat.completions.create returns the
    given replies in order. Exception instances in `replies` are raised instead.
    """
    mock_completions = MagicMock()
    mock_completions.create = AsyncMock(
        side_effect=[reply if isinstance(reply, Exception) else make_completion(reply) for reply in replies]
    )

    mock_chat = MagicMock()
    mock_chat.completions = mock_completions

    mock_client_instance = AsyncMock()
    mock_client_instance.chat = mock_chat
    return mock_client_instance, mock_completions


def sent_messages(mock_completions: MagicMock, index: int) -> list[dict]:
    return mock_completions.create.call_args_list[index].kwargs["messages"]


def sent_user_prompt(mock_completions: MagicMock, index: int) -> str:
    return sent_messages(mock_completions, index)[-1]["content"]


def sent_system_prompt(mock_completions: MagicMock, index: int) -> str:
    return sent_messages(mock_completions, index)[0]["content"]
