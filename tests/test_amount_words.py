from decimal import Decimal

from cablequote.services.pricing_services import DISCOUNTED_CEILING, TOO_LARGE, to_indian_words
from cablequote.services.pricing_services.amount_words import number_to_words


def test_zero_is_bare_word():
    assert to_indian_words(0) == "Zero"
    assert to_indian_words("0.00") == "Zero"

def test_lakh_grouping():
    assert "One Lakh Fifty Thousand" in to_indian_words(150000)

def test_full_sentence():
    assert to_indian_words(Decimal("18266.50")) == "Rupees Eighteen Thousand Two Hundred and Sixty Six Only"

def test_sub_hundred_joined_with_and():
    assert number_to_words(101) == "One Hundred and One"
    assert number_to_words(45) == "Forty Five"
    assert number_to_words(1000) == "One Thousand"

def test_crore():
    assert to_indian_words(12_500_000) == "Rupees One Crore Twenty Five Lakh Only"

def test_standard_ceiling():
    assert to_indian_words(999_999_999) != TOO_LARGE
    assert to_indian_words(1_000_000_000) == TOO_LARGE
    assert to_indian_words(1234567890) == TOO_LARGE

def test_discounted_ceiling_without_crore():
    assert to_indian_words(9_999_999, ceiling=DISCOUNTED_CEILING, use_crore=False).startswith("Rupees Ninety Nine Lakh")
    assert to_indian_words(10_000_000, ceiling=DISCOUNTED_CEILING, use_crore=False) == TOO_LARGE

def test_only_rupees_spelled():
    assert to_indian_words(Decimal("25.99")) == "Rupees Twenty Five Only"
    # paise rounding can carry into the rupee part
    assert to_indian_words(Decimal("25.999")) == "Rupees Twenty Six Only"

def test_garbage_input_reads_as_zero():
    assert to_indian_words("n/a") == "Zero"

def test_negative_amount_has_no_words():
    # discounts above 100% drive the line amount below zero
    assert to_indian_words(Decimal("-150")) == "Rupees  Only"
    assert to_indian_words("-0.40") == "Rupees  Only"
