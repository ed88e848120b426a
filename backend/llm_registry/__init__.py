"""LLM provider/model registry service."""
