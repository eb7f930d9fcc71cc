import pytest

from warkov.data.dataset import CharTokenizer, WordTokenizer, get_tokenizer, read_lines
from warkov.utils.errors import CorpusError


def test_read_lines_skips_blank_and_strips(corpus_file):
    assert read_lines(corpus_file) == ['Apple', 'apricot', 'banana', 'berry', 'cherry']


def test_char_tokenizer_lowercases():
    tok = CharTokenizer()
    assert tok.encode('AbC') == ['a', 'b', 'c']
    assert tok.decode(['a', 'b', 'c']) == 'abc'
    assert tok.decode([]) == ''


def test_word_tokenizer_splits_on_whitespace():
    tok = WordTokenizer()
    assert tok.encode('The  quick\tFox') == ['the', 'quick', 'fox']
    assert tok.decode(['the', 'fox']) == 'the fox'


def test_get_tokenizer_by_name():
    assert isinstance(get_tokenizer('chars'), CharTokenizer)
    assert isinstance(get_tokenizer('words'), WordTokenizer)
    with pytest.raises(ValueError):
        get_tokenizer('bytes')


def test_read_lines_rejects_invalid_utf8(tmp_path):
    path = tmp_path / 'latin1.txt'
    path.write_bytes(b'abc\n\xff\xfe\n')
    with pytest.raises(CorpusError):
        read_lines(path)
