"""
Whitespace normalization step.
"""

from ..utils.config import NormalizeConfig
from .base import PreprocessingStepBase


class WhitespaceNormalizer(PreprocessingStepBase):
    """Trims leading and trailing whitespace from the normalized text."""

    def should_apply(self, config: NormalizeConfig) -> bool:
        """Apply if trimming is enabled."""
        return config.trim_whitespace

    def process(self, text: str, config: NormalizeConfig) -> str:
        """Strip surrounding whitespace."""
        return text.strip()
