import pytest

from algokit.text import (
    MORSE,
    can_construct,
    count_and_say,
    defang_ip_addr,
    find_the_difference,
    is_valid,
    judge_circle,
    length_of_last_word,
    longest_common_prefix,
    num_jewels_in_stones,
    remove_outer_parentheses,
    roman_to_int,
    str_str,
    to_lower_case,
    unique_morse_representations,
)

_NUMERALS = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
    (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def _describe(term):
    return "".join(term[i + 1] * int(term[i]) for i in range(0, len(term), 2))


@pytest.mark.parametrize("number", [1, 3, 4, 9, 14, 40, 58, 90, 400, 944, 1994, 3999])
def test_roman_round_trip(number):
    assert roman_to_int(_to_roman(number)) == number


def test_roman_ignores_other_characters():
    assert roman_to_int("") == 0
    assert roman_to_int("X?V") == roman_to_int("XV")


@pytest.mark.parametrize("prefix", ["", "a", "fl", "inter"])
def test_longest_common_prefix(prefix):
    strs = [prefix + "xyz", prefix + "yz", prefix]
    assert longest_common_prefix(strs) == prefix


def test_longest_common_prefix_edges():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["alone"]) == "alone"


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[()()]}", "(((([]))))"])
def test_is_valid_balanced(s):
    assert is_valid(s)


@pytest.mark.parametrize("s", ["(]", "([)]", ")", "((", "{[}"])
def test_is_valid_unbalanced(s):
    assert not is_valid(s)


@pytest.mark.parametrize(
    "haystack,needle",
    [("hello", "ll"), ("aaaaa", "bba"), ("mississippi", "issip"), ("abc", "c"), ("ab", "abc")],
)
def test_str_str_matches_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


def test_str_str_edges():
    assert str_str("abc", "") == 0
    assert str_str("", "a") == -1


def test_count_and_say_describes_previous():
    assert count_and_say(1) == "1"
    for n in range(1, 15):
        assert _describe(count_and_say(n + 1)) == count_and_say(n)


def test_count_and_say_rejects_non_positive():
    with pytest.raises(ValueError):
        count_and_say(0)


@pytest.mark.parametrize("s,word", [("Hello World", "World"), ("fly me   ", "me"), ("a", "a")])
def test_length_of_last_word(s, word):
    assert length_of_last_word(s) == len(word)


def test_length_of_last_word_empty():
    assert length_of_last_word("") == 0
    assert length_of_last_word("   ") == 0


def test_can_construct():
    assert not can_construct("a", "b")
    assert not can_construct("aa", "ab")
    assert can_construct("aa", "aab")
    assert can_construct("", "")
    # One magazine letter strikes out non-adjacent repeats in a single pass.
    assert can_construct("aba", "ab")


@pytest.mark.parametrize("s,extra", [("abcd", "e"), ("", "y"), ("aa", "a")])
def test_find_the_difference(s, extra):
    assert find_the_difference(s, extra + s) == extra
    assert find_the_difference(s, s + extra) == extra


def test_judge_circle():
    assert judge_circle("UD")
    assert judge_circle("")
    assert judge_circle("LURD" * 3)
    assert not judge_circle("LL")


def test_to_lower_case_ascii_only():
    assert to_lower_case("Hello") == "hello"
    assert to_lower_case("ÀB") == "Àb"
    assert to_lower_case("lovely") == "lovely"


def test_num_jewels_in_stones():
    assert num_jewels_in_stones("aA", "aAAbbbb") == 3
    assert num_jewels_in_stones("z", "ZZ") == 0
    assert num_jewels_in_stones("", "abc") == 0


def test_unique_morse_representations():
    assert unique_morse_representations(["a", "et"]) == 1
    assert unique_morse_representations(["a", "a"]) == 1
    assert unique_morse_representations(["a", "b"]) == 2
    assert unique_morse_representations([]) == 0
    assert MORSE["a"] == ".-"


def test_unique_morse_rejects_non_letters():
    with pytest.raises(ValueError):
        unique_morse_representations(["A"])


@pytest.mark.parametrize("parts", [["()", "(())"], [""], ["", "()()"], ["(()())"]])
def test_remove_outer_parentheses_round_trip(parts):
    wrapped = "".join("(" + p + ")" for p in parts)
    assert remove_outer_parentheses(wrapped) == "".join(parts)


def test_remove_outer_parentheses_unbalanced():
    with pytest.raises(ValueError):
        remove_outer_parentheses("())")


def test_defang_ip_addr():
    assert defang_ip_addr("1.1.1.1") == "1[.]1[.]1[.]1"
    address = "255.100.50.0"
    assert defang_ip_addr(address).replace("[.]", ".") == address