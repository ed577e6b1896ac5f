"""Provider utilities for AI-related services."""

from __future__ import annotations

import asyncio
from typing import Optional

from app.core.config import get_settings
from app.domain.interfaces import ISummaryGenerator
from app.infrastructure.ai.summary_generator import OpenAISummaryGenerator

_summary_generator: Optional[ISummaryGenerator] = None
_summary_lock = asyncio.Lock()


async def get_summary_generator() -> ISummaryGenerator:
    """Return singleton summary generator built from resolved settings."""
    global _summary_generator

    if _summary_generator is not None:
        return _summary_generator

    async with _summary_lock:
        if _summary_generator is not None:
            return _summary_generator

        _summary_generator = OpenAISummaryGenerator(get_settings().summary_generator_config())
        return _summary_generator


async def reset_ai_services() -> None:
    global _summary_generator
    async with _summary_lock:
        _summary_generator = None


__all__ = ["get_summary_generator", "reset_ai_services"]
