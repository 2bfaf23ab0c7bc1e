"""
Base classes for normalization steps.

This module contains the base class used by normalization steps so they can
be composed in a pipeline.
"""

from typing import Any, Protocol

from ..utils.config import NormalizeConfig


class PreprocessingStepBase:
    """Base class for normalization steps with common functionality."""

    def should_apply(self, _config: NormalizeConfig) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _config: NormalizeConfig) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")


class PreprocessingStep(Protocol):
    """Protocol for steps in the normalization pipeline."""

    def process(self, text: str, config: Any) -> str:
        """Process the input text according to this step."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should be applied given the configuration."""
        ...
