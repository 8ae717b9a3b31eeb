"""Abstract AI generator interface: the opaque generation collaborator."""

from abc import ABC, abstractmethod
from typing import Any

from sinjapan_manager.domain.entities import AIFeature, GenerationResult


class AIGenerator(ABC):
    """Port: turns a feature request into a parsed JSON object."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @abstractmethod
    async def generate(self, feature: AIFeature, payload: dict[str, Any]) -> GenerationResult:
        """Run one generation.

        Args:
            feature: Which generation to run.
            payload: The validated request, camelCase keys.

        Returns:
            The generated object plus model and usage details.

        Raises:
            AIProviderError: If the collaborator fails or answers with an error.
        """
        ...
