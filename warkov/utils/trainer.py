"""Utilities for training and generation."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from warkov.data.dataset import Tokenizer
from warkov.models.markov import MarkovChain
from warkov.utils.errors import InvalidArgument, InvalidConfig
from warkov.utils.rng import MAX_SEED


logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    """Options for a generation run."""
    num: int = 10
    max_look: int = 3
    min_look: Optional[int] = None
    seed: Optional[int] = None
    tokenize: str = 'chars'

    def __post_init__(self):
        if self.num < 0:
            raise InvalidConfig(f"num must not be negative, got {self.num}")
        if self.max_look < 1:
            raise InvalidConfig(f"max_look must be at least 1, got {self.max_look}")
        if self.min_look is not None and not 1 <= self.min_look <= self.max_look:
            raise InvalidConfig(
                f"min_look must be between 1 and max_look ({self.max_look}), got {self.min_look}"
            )
        if self.seed is not None and not 0 <= self.seed <= MAX_SEED:
            raise InvalidConfig(f"seed must be between 0 and {MAX_SEED}, got {self.seed}")


class Trainer:
    """Feeds a text corpus into a MarkovChain."""

    def __init__(self, model: MarkovChain, tokenizer: Tokenizer):
        """
        Args:
            model: The chain to train
            tokenizer: Splits each line into symbols
        """
        self.model = model
        self.tokenizer = tokenizer

    def train_lines(self, lines: Iterable[str]) -> int:
        """Train on every line and return how many were used."""
        count = 0
        for i, line in enumerate(lines):
            self.model.train(self.tokenizer.encode(line))
            count += 1

            if i % 10000 == 0:
                logger.debug(f"Trained {count} sequences")

        logger.info(
            f"Trained on {count} sequences: {len(self.model.contexts)} contexts, "
            f"{len(self.model.alphabet)} distinct symbols"
        )
        return count


class Generator:
    """Draws new text from a trained MarkovChain."""

    def __init__(self, model: MarkovChain, tokenizer: Tokenizer):
        self.model = model
        self.tokenizer = tokenizer

    def sample(self, num: int, lookbehind: Optional[int] = None) -> List[str]:
        """Generate ``num`` strings with the given lookbehind (default: max_order)."""
        if lookbehind is None:
            lookbehind = self.model.max_order
        return [
            self.tokenizer.decode(self.model.generate_max_look(lookbehind))
            for _ in range(num)
        ]

    def sweep(self, num: int, min_look: int, max_look: int) -> Iterator[Tuple[int, str]]:
        """Iterate (lookbehind, text) pairs from max_look down to min_look."""
        if min_look > max_look:
            raise InvalidArgument(f"min_look ({min_look}) exceeds max_look ({max_look})")
        return self._sweep(num, min_look, max_look)

    def _sweep(self, num: int, min_look: int, max_look: int) -> Iterator[Tuple[int, str]]:
        for lookbehind in range(max_look, min_look - 1, -1):
            logger.debug(f"Generating {num} samples with lookbehind {lookbehind}")
            for text in self.sample(num, lookbehind):
                yield lookbehind, text
