from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional

from ...common.logging import get_logger
from ...core.exceptions import SummarizerMalformed, SummarizerUnavailable

logger = get_logger(__name__)

SYSTEM_PROMPT = "You are an AI analytics assistant for a multi-tenant attendance system. Answer with JSON only."

USER_PROMPT = """You are an AI analytics assistant for a {tenant_type} attendance system.
Analyze the following aggregated statistics:
{stats}

Provide a structured report including an executive summary, top risks (e.g., dropping attendance), and actionable recommendations.
Respond with a JSON object with keys: "summary" (string), "risks" (array of strings),
"actions" (array of strings) and "confidenceScore" (number between 0 and 1)."""


def strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
        text = "\n".join(lines).strip()
    return text


class LiteLLMSummarizer:
    """Narrative summarizer backed by any LiteLLM-routed model (Gemini by default)."""

    def __init__(
        self,
        *,
        model: str,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: float = 0.2,
        completion: Optional[Callable[..., Any]] = None,
    ):
        self._model = model
        self._api_key = api_key
        self._timeout = timeout
        self._temperature = temperature
        self._completion = completion

    def summarize(self, request: Mapping[str, Any]) -> Mapping[str, Any]:
        prompt = USER_PROMPT.format(tenant_type=request.get("tenantType"), stats=json.dumps(dict(request)))
        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self._temperature,
            "response_format": {"type": "json_object"},
        }
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._timeout:
            kwargs["timeout"] = self._timeout

        try:
            response = self._resolve_completion()(**kwargs)
            content = response.choices[0].message.content or ""
        except Exception as e:
            logger.error("Summarizer call failed: %s", e, extra={"model": self._model})
            raise SummarizerUnavailable(str(e)) from e

        if not content.strip():
            raise SummarizerMalformed("No response text")
        try:
            return json.loads(strip_code_fences(content))
        except json.JSONDecodeError as e:
            raise SummarizerMalformed(f"Response is not JSON: {e}") from e

    def _resolve_completion(self) -> Callable[..., Any]:
        if self._completion is None:
            import litellm

            self._completion = litellm.completion
        return self._completion
