"""
Insight generation through an OpenAI-compatible chat completions endpoint.

The generator sends the analysis summary and recent entries with a fixed
prompt, then validates whatever comes back into ``Insight`` objects. Callers
always get a list: a malformed answer yields the analysis fallback, and an
unreachable service yields the welcome fallback.

Typical usage:
    generator = InsightGenerator()
    insights = generator.generate(profile, entries)
"""
import os
import re
import json
from typing import Any, Dict, List, Optional, Sequence

import requests
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.entry import CycleLogEntry
from src.models.insight import Insight
from src.models.profile import UserCycleProfile
from src.services.statistics import summarize
from src.services.constants import (
    DEFAULT_INSIGHT_MODEL,
    DEFAULT_INSIGHT_BASE_URL,
    INSIGHT_SYSTEM_PROMPT,
    INSIGHT_PROMPT_TEMPLATE,
    FALLBACK_INSIGHTS,
    UNAVAILABLE_INSIGHTS,
    PROMPT_ENTRY_LIMIT,
    RECENT_ENTRY_WINDOW
)

logger = Logger()

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\n?|\n?```")

class InsightResponseError(ValueError):
    """Raised when the service answer is not a JSON array of insights."""
    pass

def fallback_insights() -> List[Insight]:
    """Insights used when the service answer cannot be parsed."""
    return [Insight(**item) for item in FALLBACK_INSIGHTS]

def unavailable_insights() -> List[Insight]:
    """Insights used when the service cannot be reached."""
    return [Insight(**item) for item in UNAVAILABLE_INSIGHTS]

def strip_code_fences(text: str) -> str:
    """Remove markdown code fences the model may wrap its JSON in."""
    return CODE_FENCE_PATTERN.sub("", text).strip()

def parse_insights(text: Any) -> List[Insight]:
    """
    Parse the raw model answer into insights.

    Args:
        text: Raw message content returned by the service

    Returns:
        Validated insights, or the fallback list if the answer is not a
        JSON array of objects
    """
    try:
        if not text:
            raise InsightResponseError("Empty response")
        if not isinstance(text, str):
            raise InsightResponseError(f"Unexpected content type: {type(text).__name__}")
        payload = json.loads(strip_code_fences(text))
        if not isinstance(payload, list):
            raise InsightResponseError("Response is not an array")
        return [
            Insight(**item) if isinstance(item, dict) else Insight()
            for item in payload
        ]
    except (ValueError, ValidationError) as e:
        logger.warning("Failed to parse insight response", extra={
            "error": str(e),
            "error_type": e.__class__.__name__,
            "raw_response": str(text or "")[:500]
        })
        return fallback_insights()

def build_prompt(profile: UserCycleProfile, entries: Sequence[CycleLogEntry]) -> str:
    """
    Render the user prompt from the profile, summary and recent entries.

    Args:
        profile: User cycle profile
        entries: Log entries, newest first

    Returns:
        Prompt text
    """
    summary = summarize(entries, recent=RECENT_ENTRY_WINDOW)
    recent_entries = [
        entry.model_dump(mode="json", exclude={"user_id", "entry_id", "created_at"}, exclude_none=True)
        for entry in list(entries)[:PROMPT_ENTRY_LIMIT]
    ]
    return INSIGHT_PROMPT_TEMPLATE.format(
        cycle_length=profile.cycle_length,
        period_length=profile.period_length,
        last_period_start=profile.last_period_start.isoformat() if profile.last_period_start else "unknown",
        analysis=json.dumps(summary.model_dump(mode="json"), indent=2),
        entry_count=len(recent_entries),
        recent_entries=json.dumps(recent_entries, indent=2)
    )

class InsightGenerator:
    """Client for generating insights from a chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: int = 30
    ):
        """
        Initialize the generator.

        Args:
            api_key: API key, defaults to GROQ_API_KEY
            model: Model name, defaults to GROQ_MODEL or the built-in default
            base_url: API base URL, defaults to GROQ_BASE_URL or Groq's endpoint
            timeout: Request timeout in seconds
        """
        self.api_key = api_key or os.environ.get("GROQ_API_KEY", "")
        self.model = model or os.environ.get("GROQ_MODEL", DEFAULT_INSIGHT_MODEL)
        self.base_url = (base_url or os.environ.get("GROQ_BASE_URL", DEFAULT_INSIGHT_BASE_URL)).rstrip("/")
        self.timeout = timeout

    def complete(self, prompt: str) -> str:
        """
        Send a chat completion request and return the message content.

        Raises:
            requests.exceptions.RequestException: On transport or HTTP errors
            KeyError, IndexError: If the response has no message content
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": INSIGHT_SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            "temperature": 0.6,
            "max_tokens": 1500,
            "top_p": 1,
            "stream": False
        }
        response = requests.post(
            f"{self.base_url}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json=payload,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()["choices"][0]["message"]["content"]

    def generate(
        self,
        profile: UserCycleProfile,
        entries: Sequence[CycleLogEntry]
    ) -> List[Insight]:
        """
        Generate insights for a user. Never raises.

        Args:
            profile: User cycle profile
            entries: Log entries, newest first

        Returns:
            List of insights
        """
        try:
            content = self.complete(build_prompt(profile, entries))
        except (requests.exceptions.RequestException, KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("Insight generation failed", extra={
                "user_id": profile.user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            return unavailable_insights()

        insights = parse_insights(content)
        logger.info("Generated insights", extra={
            "user_id": profile.user_id,
            "insight_count": len(insights),
            "entry_count": len(entries)
        })
        return insights
