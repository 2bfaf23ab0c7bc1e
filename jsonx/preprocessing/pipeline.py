"""
Normalization pipeline for composable JSONX cleanup steps.

This module implements the pipeline pattern to compose the comment, trailing
comma and whitespace steps that turn JSONX into strict JSON.
"""

import logging
from typing import Optional

from ..utils.config import NormalizeConfig
from .base import PreprocessingStep
from .handlers import HASH_MARKER, SLASH_MARKER, CommentHandler, TrailingCommaHandler
from .normalizers import WhitespaceNormalizer

logger = logging.getLogger(__name__)


class NormalizationPipeline:
    """Manages a sequence of normalization steps applied to JSONX text."""

    def __init__(self, steps: Optional[list[PreprocessingStep]] = None):
        self.steps = steps or []

    def add_step(self, step: PreprocessingStep) -> None:
        """Add a normalization step to the pipeline."""
        self.steps.append(step)

    def process(self, text: str, config: Optional[NormalizeConfig] = None) -> str:
        """
        Apply all applicable steps until the text stops changing.

        Every step only deletes characters, so repeated passes converge; the
        loop is still bounded by config.max_passes.
        """
        if config is None:
            config = NormalizeConfig()

        result = text
        for _ in range(config.max_passes):
            previous = result
            result = self._apply_once(result, config)
            if result == previous:
                break
        else:
            logger.debug(
                "Normalization still changing after %d passes", config.max_passes
            )
        return result

    def _apply_once(self, text: str, config: NormalizeConfig) -> str:
        for step in self.steps:
            if step.should_apply(config):
                text = step.process(text, config)
        return text

    @classmethod
    def create_default_pipeline(cls) -> "NormalizationPipeline":
        """Create the standard pipeline: `#` comments, `//` comments, commas, trim."""
        pipeline = cls()
        pipeline.add_step(CommentHandler(HASH_MARKER))
        pipeline.add_step(CommentHandler(SLASH_MARKER))
        pipeline.add_step(TrailingCommaHandler())
        pipeline.add_step(WhitespaceNormalizer())
        return pipeline


_DEFAULT_PIPELINE = NormalizationPipeline.create_default_pipeline()


def normalize(text: str, config: Optional[NormalizeConfig] = None) -> str:
    """Convert JSONX text to strict JSON text. Never raises."""
    return _DEFAULT_PIPELINE.process(text, config)


to_json = normalize
