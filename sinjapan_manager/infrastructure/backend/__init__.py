"""Upstream REST backend infrastructure package."""

from .backend_ai_generator import BackendAIGenerator
from .backend_client import BackendClient
from .http_resource_repository import HttpResourceRepository

__all__ = ["BackendAIGenerator", "BackendClient", "HttpResourceRepository"]
