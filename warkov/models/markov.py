"""Variable-order Markov chain over sequences of symbols."""

import logging
from collections import Counter
from typing import (
    Dict, Generic, Hashable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar
)

from warkov.models.tokens import BOUNDARY, Token, wrap
from warkov.utils.errors import InvalidArgument, InvalidConfig, ModelUntrained
from warkov.utils.rng import RandomSource, TorchRandomSource


logger = logging.getLogger(__name__)

K = TypeVar('K')

Context = Tuple[Token, ...]


class Distribution(Generic[K]):
    """Occurrence counts of the keys seen in one position."""

    def __init__(self):
        self.total = 0
        self.counts: Counter = Counter()

    def add(self, key: K, n: int = 1) -> None:
        self.total += n
        self.counts[key] += n

    def items(self) -> List[Tuple[K, int]]:
        """(key, count) pairs in ascending key order."""
        return sorted(self.counts.items())

    def __getitem__(self, key: K) -> int:
        return self.counts[key]

    def __contains__(self, key: object) -> bool:
        return key in self.counts

    def __iter__(self) -> Iterator[K]:
        return iter(sorted(self.counts))

    def __len__(self) -> int:
        return len(self.counts)

    def __repr__(self) -> str:
        return f"Distribution(total={self.total}, counts={dict(self.items())!r})"


def weighted_choice(rng: RandomSource, distribution: Distribution[K]) -> K:
    """Pick a key with probability proportional to its count.

    Keys are visited in ascending order so that a seeded random source always
    yields the same choice.
    """
    if distribution.total <= 0:
        raise ValueError("Cannot sample from an empty distribution")
    r = rng.randbelow(distribution.total)
    cumulative = 0
    key = None
    for key, count in distribution.items():
        if cumulative <= r < cumulative + count:
            return key
        cumulative += count
    return key


class MarkovChain:
    """A Markov chain that remembers every context up to ``max_order`` long.

    Symbols may be any hashable, totally ordered values (characters, words,
    small tuples). Each trained sequence is framed by the boundary marker,
    so generation knows where words start and end.
    """

    def __init__(self, max_order: int, rng: Optional[RandomSource] = None):
        """
        Args:
            max_order: Longest context recorded during training and consulted
                during generation
            rng: Random source used for sampling (default: unseeded
                TorchRandomSource)
        """
        if isinstance(max_order, bool) or not isinstance(max_order, int) or max_order < 1:
            raise InvalidConfig(f"max_order must be a positive integer, got {max_order!r}")
        self._max_order = max_order
        self.rng = rng if rng is not None else TorchRandomSource()
        self._stages: Dict[Context, Distribution[Token]] = {}
        self._alphabet: Distribution[Hashable] = Distribution()

    @property
    def max_order(self) -> int:
        return self._max_order

    @property
    def contexts(self) -> Mapping[Context, Distribution[Token]]:
        return self._stages

    @property
    def alphabet(self) -> Distribution[Hashable]:
        return self._alphabet

    def set_rng(self, rng: RandomSource) -> None:
        """Replace the random source, keeping everything learned so far."""
        self.rng = rng

    def _record_occurrence(self, context: Sequence[Token], next_token: Token) -> None:
        # Every suffix of the context learns the same successor.
        while context:
            stage = self._stages.get(tuple(context))
            if stage is None:
                stage = self._stages[tuple(context)] = Distribution()
            stage.add(next_token)
            context = context[1:]

    def train(self, sequence: Iterable[Hashable]) -> None:
        """Teach the chain one sequence of symbols."""
        symbols = list(sequence)
        for symbol in symbols:
            self._alphabet.add(symbol)

        term = [BOUNDARY, *wrap(symbols), BOUNDARY]
        for idx in range(1, len(term)):
            for length in range(1, self._max_order + 1):
                if length <= idx:
                    self._record_occurrence(term[idx - length:idx], term[idx])

        logger.debug(f"Trained on sequence of {len(symbols)} symbols, {len(self._stages)} contexts known")

    def _back_off(self, window: List[Token]) -> Optional[Distribution[Token]]:
        # Drops leading tokens from the window until it names a trained context.
        while window:
            stage = self._stages.get(tuple(window))
            if stage is not None or len(window) == 1:
                return stage
            del window[0]
        return None

    def distribution_for(self, context: Sequence[Token]) -> Optional[Distribution[Token]]:
        """Distribution of the longest trained suffix of ``context``."""
        return self._back_off(list(context))

    def _next_token(self, window: List[Token]) -> Token:
        stage = self._back_off(window)
        if stage is not None:
            return weighted_choice(self.rng, stage)
        if self._alphabet.total == 0:
            raise ModelUntrained("Cannot generate from a model that was never trained")
        return Token.of(weighted_choice(self.rng, self._alphabet))

    def generate(self) -> List[Hashable]:
        """Generate a sequence looking back as far as the chain allows."""
        return self.generate_max_look(self._max_order)

    def generate_max_look(self, max_lookbehind: int) -> List[Hashable]:
        """Generate a sequence using at most ``max_lookbehind`` preceding symbols."""
        if (isinstance(max_lookbehind, bool) or not isinstance(max_lookbehind, int)
                or not 1 <= max_lookbehind <= self._max_order):
            raise InvalidArgument(
                f"max_lookbehind must be between 1 and {self._max_order}, got {max_lookbehind!r}"
            )

        result = []
        window = [BOUNDARY]
        while True:
            token = self._next_token(window)
            if token.is_boundary:
                break
            result.append(token.symbol)
            window.append(token)
            while len(window) > max_lookbehind:
                del window[0]

        return result
