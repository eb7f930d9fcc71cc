"""Random sources used for sampling."""

from typing import Optional, Protocol

import torch

from warkov.utils.errors import InvalidConfig

# Range accepted by torch.Generator.manual_seed.
MAX_SEED = 2 ** 64 - 1


class RandomSource(Protocol):
    """Anything that can draw a bounded integer."""

    def randbelow(self, n: int) -> int:
        """Return a uniformly random integer in [0, n)."""
        ...


class TorchRandomSource:
    """Random source backed by a private torch.Generator."""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Seed for reproducible draws. Seeds from system entropy
                when omitted.
        """
        self.generator = torch.Generator()
        if seed is None:
            self.generator.seed()
        elif not 0 <= seed <= MAX_SEED:
            raise InvalidConfig(f"seed must be between 0 and {MAX_SEED}, got {seed}")
        else:
            self.generator.manual_seed(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() requires a positive bound, got {n}")
        return int(torch.randint(0, n, (1,), generator=self.generator).item())
