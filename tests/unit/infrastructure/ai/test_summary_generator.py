"""Tests for the best-effort summary generator."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.config import SummaryGeneratorConfig
from app.domain.value_objects import FALLBACK_SUMMARY
from app.infrastructure.ai.summary_generator import OpenAISummaryGenerator, build_summary_prompt


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def make_client(create):
    client = MagicMock()
    client.chat.completions.create = create
    return client


@pytest.fixture
def config():
    return SummaryGeneratorConfig(api_key="test-key", model="test-model", timeout_seconds=1.0)


class TestBuildSummaryPrompt:
    def test_includes_job_and_cv(self):
        prompt = build_summary_prompt("Backend Engineer", "Build APIs", "Jane Doe, Python")

        assert "Job Title: Backend Engineer" in prompt
        assert "Job Description: Build APIs" in prompt
        assert "Jane Doe, Python" in prompt

    def test_marks_missing_inputs(self):
        prompt = build_summary_prompt("Role", "", "")

        assert "(not provided)" in prompt
        assert "(no CV text could be extracted)" in prompt


class TestOpenAISummaryGenerator:
    @pytest.mark.asyncio
    async def test_success(self, config):
        create = AsyncMock(return_value=completion("  Tailored summary.  "))
        generator = OpenAISummaryGenerator(config, client=make_client(create))

        summary = await generator.generate("Role", "Desc", "CV text")

        assert summary.text == "Tailored summary."
        assert summary.succeeded is True
        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["max_tokens"] == config.max_tokens
        assert kwargs["messages"][0]["role"] == "user"
        assert generator.get_metrics()["succeeded"] == 1

    @pytest.mark.asyncio
    async def test_missing_credential_skips_call(self):
        create = AsyncMock()
        generator = OpenAISummaryGenerator(
            SummaryGeneratorConfig(api_key=None), client=make_client(create)
        )

        summary = await generator.generate("Role", "Desc", "CV text")

        assert summary.text == FALLBACK_SUMMARY
        assert summary.succeeded is False
        create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_provider_error_falls_back(self, config):
        generator = OpenAISummaryGenerator(
            config, client=make_client(AsyncMock(side_effect=RuntimeError("boom")))
        )

        summary = await generator.generate("Role", "Desc", "CV text")

        assert summary.text == FALLBACK_SUMMARY
        assert generator.get_metrics()["failed"] == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [completion(""), completion(None), SimpleNamespace(choices=[])])
    async def test_empty_completion_falls_back(self, config, response):
        generator = OpenAISummaryGenerator(config, client=make_client(AsyncMock(return_value=response)))

        summary = await generator.generate("Role", "Desc", "CV text")

        assert summary.succeeded is False

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self):
        async def slow(**kwargs):
            await asyncio.sleep(1)
            return completion("late")

        generator = OpenAISummaryGenerator(
            SummaryGeneratorConfig(api_key="k", timeout_seconds=0.05), client=make_client(slow)
        )

        summary = await generator.generate("Role", "Desc", "CV text")

        assert summary.text == FALLBACK_SUMMARY

    @pytest.mark.asyncio
    async def test_health_reports_configuration(self):
        generator = OpenAISummaryGenerator(SummaryGeneratorConfig(api_key=None))

        health = await generator.check_health()

        assert health["status"] == "degraded"
        assert health["configured"] is False
