import pytest

from libmx.text import (
    count_substr,
    count_words,
    del_extra_spaces,
    file_to_str,
    get_char_index,
    get_substr_index,
    replace_substr,
    strjoin,
    strndup,
    strsplit,
    strstr,
    strtrim,
    str_reverse,
)


@pytest.mark.parametrize("s", ["", "a", "abc", "racecar", "hello world"])
def test_str_reverse(s):
    reversed_s = str_reverse(s)
    assert len(reversed_s) == len(s)
    assert all(reversed_s[i] == s[-1 - i] for i in range(len(s)))
    assert str_reverse(reversed_s) == s


def test_get_char_index():
    assert get_char_index("hello", "l") == "hello".index("l")
    assert get_char_index("hello", "z") == -1
    assert get_char_index("", "a") == -1


def test_get_char_index_rejects_multichar():
    with pytest.raises(ValueError):
        get_char_index("abc", "ab")


def test_strndup():
    assert strndup("hello", 3) == "hel"
    assert strndup("hello", 50) == "hello"
    assert strndup(None, 0) == ""


def test_strndup_none_with_length():
    with pytest.raises(ValueError):
        strndup(None, 1)


def test_strstr():
    assert strstr("hello world", "wor") == "world"
    assert strstr("hello world", "xyz") is None
    assert strstr("hello", "") == "hello"
    assert strstr("ab", "abc") is None
    assert strstr(None, "") is None


def test_strstr_none_haystack():
    with pytest.raises(ValueError):
        strstr(None, "a")


@pytest.mark.parametrize("sub", ["b", "cab", "abc", "c"])
def test_get_substr_index(sub):
    s = "abcabc"
    index = get_substr_index(s, sub)
    assert s[index:].startswith(sub)
    assert sub not in s[: index + len(sub) - 1]


def test_get_substr_index_missing_and_empty():
    assert get_substr_index("abc", "x") == -1
    assert get_substr_index("abc", "") == 0


def test_count_substr_overlapping():
    assert count_substr("aaaa", "aa") == 3


@pytest.mark.parametrize("k", [0, 1, 4, 9])
def test_count_substr_repeats(k):
    assert count_substr("ab" * k, "ab") == k
    assert count_substr("x-" + "yo, " * k, "yo") == k


def test_count_substr_empty_sub():
    assert count_substr("abc", "") == 0


def test_count_words_example():
    assert count_words("  follow  *   the  white rabbit ", "*") == 2


@pytest.mark.parametrize("words", [["a"], ["one", "two", "three"], ["x", "y"]])
@pytest.mark.parametrize("sep", ["*", "**", "*" * 5])
def test_count_words_invariant(words, sep):
    text = sep + sep.join(words) + sep
    assert count_words(text, "*") == len(words)


def test_count_words_empty():
    assert count_words("", "*") == 0
    assert count_words("****", "*") == 0


def test_strtrim():
    assert strtrim("\f  My name... is Neo  \t\n ") == "My name... is Neo"
    assert strtrim(" \t ") == ""
    assert strtrim("\x1cab\x1c") == "\x1cab\x1c"


def test_del_extra_spaces():
    assert del_extra_spaces("\f My name...   is \r Neo \t\n ") == "My name... is Neo"
    assert del_extra_spaces("   ") == ""


@pytest.mark.parametrize("s", ["a  b", " x\ty\nz ", "word", "\v\va \f b"])
def test_del_extra_spaces_invariants(s):
    result = del_extra_spaces(s)
    assert "  " not in result
    assert result == result.strip()
    assert result.split(" ") == s.split()


def test_strsplit():
    assert strsplit("**Good bye,**Mr.*Anderson.****", "*") == [
        "Good bye,",
        "Mr.",
        "Anderson.",
    ]
    assert strsplit("***", "*") == []
    assert strsplit("", "*") == []


def test_strsplit_matches_count_words():
    s = "  a b   c  d "
    assert len(strsplit(s, " ")) == count_words(s, " ")


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin(None, "cd") == "cd"
    assert strjoin("ab", None) == "ab"
    assert strjoin(None, None) is None


def test_file_to_str(tmp_path):
    content = "first line\nsecond line\r\nthird"
    path = tmp_path / "sample.txt"
    path.write_bytes(content.encode("utf-8"))
    assert file_to_str(str(path)) == content


def test_file_to_str_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_to_str(str(tmp_path / "absent.txt"))


def test_replace_substr_empty_sub_and_no_match():
    assert replace_substr("McDonalds", "", "x") == "McDonalds"
    assert replace_substr("McDonalds", "zz", "x") == "McDonalds"