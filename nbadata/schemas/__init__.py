"""
schemas/ — Pydantic response models for the NBA Data API

Provides typed responses, auto-generated OpenAPI docs, and a
consistent error body across all endpoints.
"""
