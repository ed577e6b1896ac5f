"""AI infrastructure services.

- Summary generator backed by OpenAI-compatible chat completions
"""

from app.infrastructure.ai.summary_generator import OpenAISummaryGenerator

__all__ = [
    "OpenAISummaryGenerator",
]
