"""Optional symbols: a real symbol or the sequence boundary marker."""

import functools
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Tuple


@functools.total_ordering
@dataclass(frozen=True)
class Token:
    """A symbol seen in training, or the boundary between sequences.

    The boundary sorts before every real symbol. Real symbols compare by
    their own ordering, so ``Token.of(None)`` is a value like any other and
    never equal to ``BOUNDARY``.
    """
    symbol: Any = None
    is_boundary: bool = False

    @classmethod
    def of(cls, symbol: Hashable) -> 'Token':
        return cls(symbol=symbol)

    def _sort_key(self) -> Tuple:
        return (0,) if self.is_boundary else (1, self.symbol)

    def __lt__(self, other: 'Token') -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        return 'BOUNDARY' if self.is_boundary else f'Token({self.symbol!r})'


BOUNDARY = Token(is_boundary=True)


def wrap(symbols: Iterable[Hashable]) -> Tuple[Token, ...]:
    """Convert plain symbols into a context key."""
    return tuple(Token.of(s) for s in symbols)
