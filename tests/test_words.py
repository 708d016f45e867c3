import pytest

from invoice_service.services.errors import InvalidAmountError
from invoice_service.services.words import amount_in_words, integer_to_words, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "Zero"),
        (7, "Seven"),
        (13, "Thirteen"),
        (40, "Forty"),
        (47, "Forty-Seven"),
        (100, "One Hundred"),
        (101, "One Hundred and One"),
        (1000, "One Thousand"),
        (1234, "One Thousand Two Hundred and Thirty-Four"),
        (2050, "Two Thousand and Fifty"),
        (100000, "One Lakh"),
        (250300, "Two Lakh Fifty Thousand Three Hundred"),
        (10000000, "One Crore"),
        (10000001, "One Crore and One"),
        (
            12345678,
            "One Crore Twenty-Three Lakh Forty-Five Thousand Six Hundred and Seventy-Eight",
        ),
        (1000000000, "One Hundred Crore"),
    ],
)
def test_integer_to_words(value, expected):
    assert integer_to_words(value) == expected


def test_negative_values_are_prefixed():
    assert integer_to_words(-5) == "Negative Five"
    assert integer_to_words(-1234) == "Negative One Thousand Two Hundred and Thirty-Four"


def test_conjunction_only_before_final_remainder():
    words = integer_to_words(1234)
    assert words.split().count("and") == 1
    assert "Thousand and" not in words


@pytest.mark.parametrize("value", [1.5, "12", True])
def test_non_integers_are_rejected(value):
    with pytest.raises(TypeError):
        integer_to_words(value)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(286.49) == 286
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3
    with pytest.raises(InvalidAmountError):
        round_half_up(float("nan"))


def test_amount_in_words():
    assert amount_in_words(286.0) == "Rupees Two Hundred and Eighty-Six Only"
    assert amount_in_words(0) == "Rupees Zero Only"
    assert amount_in_words(99.5) == "Rupees One Hundred Only"
    assert amount_in_words(12, currency_unit="Dollars") == "Dollars Twelve Only"


def test_very_large_amounts_are_rendered():
    assert round_half_up(1e27) == 10**27
    assert integer_to_words(10**12) == "One Lakh Crore"
    assert amount_in_words(1e26) == "Rupees One Lakh Crore Crore Crore Only"
