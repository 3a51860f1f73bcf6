import pytest

from minilibc.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen():
    assert strlen("") == 0
    assert strlen("hello") == len("hello")


def test_strlcpy_truncates_and_reports_full_length():
    src = "hello world"
    copied, total = strlcpy(src, 6)
    assert copied == src[:5]
    assert total == len(src)


def test_strlcpy_fits():
    copied, total = strlcpy("abc", 10)
    assert copied == "abc"
    assert total == len("abc")


def test_strlcpy_zero_size():
    assert strlcpy("abc", 0) == ("", len("abc"))


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "barbaz", 5)
    assert len(result) == 5 - 1
    assert result.startswith("foo")
    assert "barbaz".startswith(result[3:])
    assert total == len("foo") + len("barbaz")


def test_strlcat_destination_already_full():
    result, total = strlcat("foobar", "xyz", 3)
    assert result == "foobar"
    assert total == 3 + len("xyz")


def test_strchr():
    s = "hello"
    assert strchr(s, "l") == s.index("l")
    assert strchr(s, "z") is None
    assert strchr(s, "\0") == len(s)


def test_strrchr():
    s = "hello"
    assert strrchr(s, "l") == s.rindex("l")
    assert strrchr(s, "z") is None
    assert strrchr(s, "\0") == len(s)


def test_strchr_rejects_multi_character():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_within_limit():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("", "", 5) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strnstr():
    hay = "lorem ipsum dolor"
    assert strnstr(hay, "ipsum", len(hay)) == hay.index("ipsum")
    assert strnstr(hay, "ipsum", 10) is None
    assert strnstr(hay, "", 0) == 0
    assert strnstr(hay, "xyz", len(hay)) is None


def test_strdup():
    assert strdup("copy me") == "copy me"


def test_substr():
    s = "hello world"
    assert substr(s, 6, 5) == s[6:]
    assert substr(s, 6, 100) == s[6:]
    assert substr(s, 50, 3) == ""
    assert substr(None, 0, 3) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    with pytest.raises(TypeError):
        strjoin(None, "bar")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim("abba", "ab") == ""
    assert strtrim("-+mid+-", "+-") == "mid"


def test_split():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split(",,,", ",") == []
    assert split("one", ",") == ["one"]


def test_split_pieces_hold_no_separator():
    words = split("a,b,,c,", ",")
    assert ",".join(words) == "a,b,c"
    assert all("," not in word and word for word in words)


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strmapi():
    seen = []

    def upper_and_record(index, char):
        seen.append(index)
        return char.upper()

    assert strmapi("abc", upper_and_record) == "ABC"
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    chars = list("abc")

    def upper_at(index, seq):
        seq[index] = seq[index].upper()

    assert striteri(chars, upper_at) is None
    assert chars == list("ABC")


def test_striteri_none_calls_nothing():
    calls = []
    striteri(None, lambda index, seq: calls.append(index))
    assert calls == []