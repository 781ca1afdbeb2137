import pytest

from mshell.tokenizer import tokenize


def test_simple_words():
    assert tokenize("echo hello") == ["echo", "hello"]


def test_double_quotes_keep_spaces():
    assert tokenize('echo "hello world"') == ["echo", "hello world"]


def test_single_quotes_keep_spaces():
    assert tokenize("echo 'a  b'") == ["echo", "a  b"]


def test_quotes_split_adjacent_words():
    assert tokenize("a'b'c") == ["a", "b", "c"]


def test_empty_quotes_give_empty_word():
    assert tokenize('""') == [""]


def test_unterminated_quote_runs_to_end():
    assert tokenize('echo "abc def') == ["echo", "abc def"]


def test_other_quote_inside_quotes_is_literal():
    assert tokenize("'say \"hi\"'") == ['say "hi"']


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_blank_lines_give_no_tokens(line):
    assert tokenize(line) == []


def test_mixed_whitespace():
    assert tokenize("\tls\t-l \n /tmp ") == ["ls", "-l", "/tmp"]


def test_unquoted_words_never_contain_whitespace():
    tokens = tokenize("one  two\tthree\nfour")
    assert len(tokens) == 4
    assert all(" " not in t and "\t" not in t for t in tokens)