import logging

from openai import AsyncOpenAI

from app.core.config import settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Provider-agnostic text generation client using the OpenAI API spec."""

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
    ):
        self.model_name = model_name or settings.MODEL_DEFAULT

        # Use LLM_API_KEY or fallback to OPENAI_API_KEY if only the provider default is set
        resolved_api_key = api_key or settings.LLM_API_KEY or settings.OPENAI_API_KEY
        resolved_base_url = base_url or settings.LLM_BASE_URL

        # Failed calls surface to the caller as-is; the pipeline never retries transport errors.
        self.client = AsyncOpenAI(
            base_url=resolved_base_url,
            api_key=resolved_api_key,
            max_retries=0,
        )

    def _chat_completion_kwargs(self, *, temperature: float | None, max_tokens: int | None) -> dict:
        """Build provider/model-compatible kwargs for chat completions."""
        model_name = (self.model_name or "").lower()
        kwargs: dict = {}
        # GPT-5 family rejects non-default temperature values and the legacy max_tokens name.
        if model_name.startswith("gpt-5"):
            if max_tokens is not None:
                kwargs["max_completion_tokens"] = max_tokens
            return kwargs
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        return kwargs

    async def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        temperature: float | None = 0.2,
        max_tokens: int | None = None,
    ) -> str:
        """
        Generate plain text content and return it stripped of surrounding whitespace.
        A single request is issued; provider errors propagate to the caller.
        """
        logger.info("Issuing text request to model %s...", self.model_name)
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                **self._chat_completion_kwargs(temperature=temperature, max_tokens=max_tokens),
            )
        except Exception as e:
            logger.error("Error calling LLM provider %s: %s", self.model_name, e)
            raise

        if not getattr(response, "choices", None):
            logger.error("Received 0 choices from %s: %s", self.model_name, response)
            raise ValueError(
                f"Provider {self.model_name} returned no output. Try again or change model."
            )

        text_response = (response.choices[0].message.content or "").strip()
        logger.info(
            "Successfully received text response from %s (%s chars).",
            self.model_name,
            len(text_response),
        )
        return text_response
