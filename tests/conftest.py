from typing import List

import pytest

from warkov.models.markov import MarkovChain


class ScriptedRandomSource:
    """Returns pre-chosen values and records every bound it was asked for."""

    def __init__(self, values: List[int]):
        self.values = list(values)
        self.bounds: List[int] = []

    def randbelow(self, n: int) -> int:
        self.bounds.append(n)
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < n, f"scripted value {value} out of range for bound {n}"
        return value


@pytest.fixture
def scripted():
    return ScriptedRandomSource


@pytest.fixture
def abc_chain():
    mc = MarkovChain(2)
    mc.train("abc")
    return mc


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('Apple\napricot\n\nbanana\n  berry  \ncherry\n', encoding='utf-8')
    return path
