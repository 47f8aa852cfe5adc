from typing import Any, Dict, Optional

from mention_checker.errors import LLMNotConfiguredError
from mention_checker.models.base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-pro",
        temperature: float = 0.0,
        max_output_tokens: int = 2048,
    ):
        if not api_key:
            raise LLMNotConfiguredError("GEMINI_API_KEY not configured on server")
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError("pip install google-generativeai required for Gemini support")
        genai.configure(api_key=self.api_key)
        self.client = genai.GenerativeModel(model)

    def _generation_config(self, temperature: Optional[float]) -> Dict[str, Any]:
        return {
            "temperature": self.temperature if temperature is None else temperature,
            "max_output_tokens": self.max_output_tokens,
        }

    async def answer_async(self, prompt: str, temperature: Optional[float] = None) -> str:
        """Un seul appel par requête : retourne juste le texte généré."""
        response = await self.client.generate_content_async(
            prompt,
            generation_config=self._generation_config(temperature),
        )
        return response.text or ""
