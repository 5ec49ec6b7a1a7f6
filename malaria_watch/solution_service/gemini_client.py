"""
Gemini client wrapper.
Sends the prompt and report photo to the model and pulls the answer text out of the response.
"""

import logging
from typing import Any, List, Optional, Protocol

# --- GEMINI IMPORTS ---
from google import genai
from google.genai import types

from malaria_watch.solution_service.errors import UpstreamError
from malaria_watch.solution_service.models import IMAGE_MIME_TYPE

logger = logging.getLogger(__name__)

FALLBACK_SOLUTION = "Não foi possível gerar uma solução."
TEMPERATURE = 0.4

RELAXED_CATEGORIES = [
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
]


class SolutionGenerator(Protocol):
    """Anything that turns a prompt and a JPEG into answer text."""

    def submit(self, prompt: str, image: bytes) -> str:
        ...


def build_safety_settings() -> List[types.SafetySetting]:
    return [
        types.SafetySetting(category=category, threshold=types.HarmBlockThreshold.BLOCK_NONE)
        for category in RELAXED_CATEGORIES
    ]


def build_generation_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        temperature=TEMPERATURE,
        safety_settings=build_safety_settings(),
    )


def extract_solution_text(response: Any) -> str:
    """
    Pull the first candidate's first text part out of a Gemini response.

    Any missing piece (candidates, content, parts, text) gives the fallback
    message instead of an error.

    Args:
        response: A GenerateContentResponse (or anything shaped like one).

    Returns:
        str: Stripped answer text, or FALLBACK_SOLUTION.
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return FALLBACK_SOLUTION

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return FALLBACK_SOLUTION

    text = getattr(parts[0], "text", None)
    if not isinstance(text, str):
        return FALLBACK_SOLUTION

    return text.strip() or FALLBACK_SOLUTION


class GeminiSolutionClient:
    """
    SolutionGenerator backed by the google-genai SDK.

    The SDK client is built on first use and reused afterwards. A missing key
    only surfaces when a request actually reaches the model.
    """

    def __init__(self, api_key: Optional[str], model_name: str):
        self.api_key = api_key
        self.model_name = model_name
        self._genai_client = None

    def _client(self) -> genai.Client:
        if not self.api_key:
            raise UpstreamError("GEMINI_API_KEY is not configured.")
        if self._genai_client is None:
            self._genai_client = genai.Client(api_key=self.api_key)
        return self._genai_client

    def submit(self, prompt: str, image: bytes) -> str:
        """
        Send one generate_content request.

        Args:
            prompt (str): Instruction text.
            image (bytes): JPEG bytes, sent inline.

        Returns:
            str: The extracted solution text.

        Raises:
            UpstreamError: If the key is missing or the SDK call fails.
        """
        client = self._client()

        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_bytes(data=image, mime_type=IMAGE_MIME_TYPE),
                ],
            )
        ]

        logger.info("Requesting solution from %s (%d image bytes)", self.model_name, len(image))
        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=build_generation_config(),
            )
        except Exception as e:
            raise UpstreamError(f"Gemini request failed: {e}") from e

        return extract_solution_text(response)
