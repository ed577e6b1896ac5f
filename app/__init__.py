"""
Remote Job Board - job postings, candidate CVs and AI-tailored CV generation.

This package provides a FastAPI-based backend for a job board, including
authentication, job and candidate management, CV storage and the
tailored-CV generation pipeline.
"""

__version__ = "1.0.0"
