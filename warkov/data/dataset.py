"""Corpus loading and tokenization utilities."""

from pathlib import Path
from typing import Hashable, Iterable, List, Union

from warkov.utils.errors import CorpusError


def read_lines(path: Union[str, Path]) -> List[str]:
    """Read non-blank training lines from a UTF-8 text file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return [l.strip() for l in f if l.strip()]
    except UnicodeDecodeError as e:
        raise CorpusError(f"{path} is not valid UTF-8: {e}") from e


class CharTokenizer:
    """Lower-cases a line and splits it into characters."""

    name = 'chars'

    def encode(self, text: str) -> List[str]:
        return list(text.lower())

    def decode(self, symbols: Iterable[Hashable]) -> str:
        return ''.join(str(s) for s in symbols)


class WordTokenizer:
    """Lower-cases a line and splits it on whitespace."""

    name = 'words'

    def encode(self, text: str) -> List[str]:
        return text.lower().split()

    def decode(self, symbols: Iterable[Hashable]) -> str:
        return ' '.join(str(s) for s in symbols)


TOKENIZERS = {
    CharTokenizer.name: CharTokenizer,
    WordTokenizer.name: WordTokenizer,
}

Tokenizer = Union[CharTokenizer, WordTokenizer]


def get_tokenizer(name: str) -> Tokenizer:
    """Build a tokenizer from its name ('chars' or 'words')."""
    try:
        return TOKENIZERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown tokenizer {name!r}, expected one of {sorted(TOKENIZERS)}"
        ) from None
