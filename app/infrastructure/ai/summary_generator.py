"""
Tailored professional summary generation.

Calls an OpenAI-compatible chat completions endpoint (OpenRouter by default)
with a single user prompt built from the job posting and the candidate's
truncated CV text. The step is best-effort: a missing credential, timeout,
HTTP error or empty completion yields the fallback summary instead of an
exception.
"""

import asyncio
import time
from typing import Any, Dict, Optional

import structlog
from openai import AsyncOpenAI

from app.core.config import SummaryGeneratorConfig
from app.domain.interfaces import ISummaryGenerator
from app.domain.value_objects import Summary

logger = structlog.get_logger(__name__)


SUMMARY_PROMPT_TEMPLATE = """You are a professional CV writer.

Write a professional CV summary tailored for the role below.

Job Title: {job_title}
Job Description: {job_description}

Candidate CV:
{source_text}

Keep it concise and impactful: 3 to 5 sentences, plain text, no headings."""


def build_summary_prompt(job_title: str, job_description: str, source_text: str) -> str:
    """Render the user prompt. Empty inputs are marked rather than omitted."""
    return SUMMARY_PROMPT_TEMPLATE.format(
        job_title=(job_title or "").strip() or "(not specified)",
        job_description=(job_description or "").strip() or "(not provided)",
        source_text=(source_text or "").strip() or "(no CV text could be extracted)",
    )


class OpenAISummaryGenerator(ISummaryGenerator):
    """
    Summary generator backed by ``AsyncOpenAI`` chat completions.

    The request carries a timeout and an output token cap and is never
    retried by the client.
    """

    def __init__(
        self,
        config: SummaryGeneratorConfig,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.config = config
        self._client = client
        self._metrics = {"requests": 0, "succeeded": 0, "failed": 0, "skipped": 0}

    @property
    def client(self) -> AsyncOpenAI:
        """Get or create the OpenAI client"""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
                max_retries=0,
            )
            logger.info(
                "Summary generation client initialized",
                base_url=self.config.base_url,
                model=self.config.model,
            )
        return self._client

    async def generate(self, job_title: str, job_description: str, source_text: str) -> Summary:
        if not self.config.has_credential:
            self._metrics["skipped"] += 1
            logger.warning("Summary generation skipped: no API key configured")
            return Summary.fallback()

        prompt = build_summary_prompt(job_title, job_description, source_text)
        self._metrics["requests"] += 1
        start_time = time.time()

        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.config.model,
                    messages=[{"role": "user", "content": prompt}],
                    max_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                ),
                timeout=self.config.timeout_seconds,
            )
            text = self._completion_text(response)
        except Exception as e:
            self._metrics["failed"] += 1
            logger.warning(
                "Summary generation failed, using fallback",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=int((time.time() - start_time) * 1000),
            )
            return Summary.fallback()

        if not text:
            self._metrics["failed"] += 1
            logger.warning("Summary generation returned empty content, using fallback")
            return Summary.fallback()

        self._metrics["succeeded"] += 1
        logger.info(
            "Summary generated",
            model=self.config.model,
            prompt_length=len(prompt),
            summary_length=len(text),
            duration_ms=int((time.time() - start_time) * 1000),
        )
        return Summary(text=text, succeeded=True)

    @staticmethod
    def _completion_text(response: Any) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            return ""
        return content.strip()

    def get_metrics(self) -> Dict[str, int]:
        return dict(self._metrics)

    async def check_health(self) -> Dict[str, Any]:
        return {
            "status": "healthy" if self.config.has_credential else "degraded",
            "configured": self.config.has_credential,
            "model": self.config.model,
            "metrics": self.get_metrics(),
        }


__all__ = ["OpenAISummaryGenerator", "build_summary_prompt", "SUMMARY_PROMPT_TEMPLATE"]
