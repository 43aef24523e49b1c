"""OpenAI Responses API client for text completions."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from fridge_insights.errors import UpstreamError
from fridge_insights.services.insights import LanguageModelClient


@dataclass
class OpenAIChatClient(LanguageModelClient):
    """Language model client backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    store: bool = False

    @classmethod
    def create(
        cls, api_key: str, model: str, store: bool = False
    ) -> "OpenAIChatClient":
        """Create an OpenAI chat client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model, store=store)

    async def complete(
        self, messages: list[dict[str, str]], temperature: float
    ) -> str:
        """Send the conversation and return the model's text reply."""
        response = await self.client.responses.create(
            model=self.model,
            input=messages,
            temperature=temperature,
            store=self.store,
        )
        output_text = response.output_text
        if not output_text:
            raise UpstreamError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
