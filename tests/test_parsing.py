import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import InputError, check_input, check_str, parse_input

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@pytest.mark.parametrize(
    "tokens",
    [["1"], ["1", "2", "3"], ["-4", "+5", "6"], ["0", "-0", "42", "+7"]],
)
def test_check_str_counts_numbers(tokens):
    assert check_str(" ".join(tokens)) == len(tokens)
    assert check_str("  " + "\n".join(tokens) + " ") == len(tokens)


def test_check_str_sign_inside_number_starts_new_one():
    assert check_str("1-2") == 2


@pytest.mark.parametrize(
    "text", ["", "   ", "abc", "1 a", "-", "+", "--1", "1 +", "\t5", "5\r"]
)
def test_check_str_rejects(text):
    with pytest.raises(InputError):
        check_str(text)


def test_vertical_tab_separates_numbers():
    assert check_str("\v5\f6") == len(["5", "6"])


def test_check_input_several_arguments():
    args = ["1", "-2", "+3"]
    assert check_input(args) == len(args)


def test_check_input_single_string():
    assert check_input(["4 5 6"]) == len(["4", "5", "6"])


@pytest.mark.parametrize("args", [[], ["1 2", "3"], ["1", "x"], ["1", ""]])
def test_check_input_rejects(args):
    with pytest.raises(InputError):
        check_input(args)


def test_parse_input_ranks():
    assert parse_input(["3", "1", "2"]) == [2, 0, 1]


def test_single_string_matches_separate_arguments():
    assert parse_input(["3 1 2"]) == parse_input(["3", "1", "2"])
    assert parse_input(["1-2"]) == parse_input(["1", "-2"])


@pytest.mark.parametrize(
    "args", [["1", "1"], ["5 5"], ["+1", "1"], ["2147483648", "-2147483648"]]
)
def test_duplicates_rejected(args):
    with pytest.raises(InputError):
        parse_input(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_input(["nope"])


@given(st.lists(INT32, min_size=2, max_size=30, unique=True))
def test_ranks_form_order_preserving_permutation(values):
    ranks = parse_input([str(v) for v in values])
    assert sorted(ranks) == list(range(len(values)))
    for (v1, r1), (v2, r2) in zip(zip(values, ranks), zip(values[1:], ranks[1:])):
        assert (v1 < v2) == (r1 < r2)
    assert parse_input([" ".join(str(v) for v in values)]) == ranks