import pytest

from solong.strings import (
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_delimiters_is_empty():
    assert split("////", "/") == []


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_pieces_contain_no_delimiter():
    words = split("1,,0,CEP,,", ",")
    assert all(word and "," not in word for word in words)
    assert ",".join(words) == "1,0,CEP"


def test_strcmp_equal_is_zero():
    assert strcmp("so_long", "so_long") == 0


@pytest.mark.parametrize("first,second", [("abc", "abd"), ("ab", "abc"), ("", "a")])
def test_strcmp_ordering_and_antisymmetry(first, second):
    assert strcmp(first, second) < 0
    assert strcmp(second, first) == -strcmp(first, second)


def test_strcmp_against_empty_gives_code_point():
    assert strcmp("a", "") == ord("a")


def test_strncmp_limits_comparison():
    assert strncmp("map.ber", "map.txt", 4) == 0
    assert strncmp("map.ber", "map.txt", 5) < 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative_count_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_within_limit():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:].startswith("ipsum")


def test_strnstr_match_must_fit_in_limit():
    assert strnstr("lorem ipsum", "ipsum", 8) is None


def test_strnstr_empty_needle_is_start():
    assert strnstr("abc", "", 0) == 0


def test_strchr_first_and_strrchr_last():
    text = "10C0C1"
    first = strchr(text, "C")
    last = strrchr(text, "C")
    assert text[first] == "C" and text[last] == "C"
    assert "C" not in text[:first]
    assert "C" not in text[last + 1 :]
    assert first < last


def test_strchr_missing_is_none():
    assert strchr("0101", "E") is None
    assert strrchr("0101", "E") is None


def test_nul_search_finds_end():
    assert strchr("wasd", "\0") == len("wasd")
    assert strrchr("wasd", "\0") == len("wasd")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim(" keep ", "") == " keep "


def test_strlcpy_truncates_and_reports_length():
    copied, length = strlcpy("so_long", 3)
    assert copied == "so"
    assert length == len("so_long")


def test_strlcpy_zero_size():
    assert strlcpy("abc", 0) == ("", len("abc"))


def test_strlcat_full_room():
    result, length = strlcat("so", "_long", 20)
    assert result == "so_long"
    assert length == len("so_long")


def test_strlcat_size_below_dest():
    dest, src = "abcdef", "xyz"
    result, length = strlcat(dest, src, 3)
    assert result == dest
    assert length == 3 + len(src)


def test_strlcat_result_fits_size():
    result, _ = strlcat("abc", "defgh", 6)
    assert len(result) == 5
    assert result.startswith("abc")


def test_strmapi_uses_index_and_char():
    assert strmapi("abcd", lambda i, c: c.upper() if i % 2 else c) == "aBcD"


def test_striteri_modifies_in_place():
    chars = list("wall")
    striteri(chars, lambda i, c: "1" if i == 0 else None)
    assert "".join(chars) == "1all"


def test_striteri_none_is_noop():
    calls = []
    assert striteri(None, lambda i, c: calls.append(i)) is None
    assert calls == []


def test_substr_basic_and_past_end():
    assert substr("assets/wall.xpm", 7, 4) == "wall"
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 1, 100) == "bc"


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_round_trip_with_substr():
    first, second = "Steps: ", "42"
    joined = strjoin(first, second)
    assert substr(joined, 0, len(first)) == first
    assert substr(joined, len(first), len(second)) == second