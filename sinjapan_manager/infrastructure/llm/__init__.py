"""LLM infrastructure module: concrete AI generator implementations."""

from .openrouter_ai_generator import OpenRouterAIGenerator

__all__ = [
    "OpenRouterAIGenerator",
]
