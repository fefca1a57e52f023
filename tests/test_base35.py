import pytest

from deckcode.codec.base35 import BASE35_ALPHABET, MAX_TOKEN_VALUE, from_base35, to_base35


class TestToBase35:
    def test_single_digit_is_padded(self) -> None:
        assert to_base35(1) == "01"
        assert to_base35(9) == "09"
        assert to_base35(10) == "0A"
        assert to_base35(34) == "0Y"

    def test_two_digits(self) -> None:
        assert to_base35(35) == "10"
        assert to_base35(41) == "16"
        assert to_base35(MAX_TOKEN_VALUE) == "YY"

    def test_zero_encodes_as_zeros(self) -> None:
        assert to_base35(0) == "00"
        assert to_base35(0, width=3) == "000"

    def test_custom_width(self) -> None:
        assert to_base35(35, width=4) == "0010"

    def test_value_too_wide_raises(self) -> None:
        with pytest.raises(ValueError, match="needs 3 base-35 digits"):
            to_base35(MAX_TOKEN_VALUE + 1)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            to_base35(-1)

    def test_alphabet_excludes_marker(self) -> None:
        assert len(BASE35_ALPHABET) == 35
        assert "Z" not in BASE35_ALPHABET


class TestFromBase35:
    def test_decodes_tokens(self) -> None:
        assert from_base35("01") == 1
        assert from_base35("0Y") == 34
        assert from_base35("10") == 35
        assert from_base35("YY") == 1224

    def test_leading_zeros_ignored(self) -> None:
        assert from_base35("0001") == 1

    def test_marker_is_not_a_digit(self) -> None:
        with pytest.raises(ValueError, match="Invalid base-35 character 'Z'"):
            from_base35("0Z")

    def test_lowercase_rejected(self) -> None:
        with pytest.raises(ValueError):
            from_base35("0a")

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            from_base35("")

    def test_inverse_of_to_base35(self) -> None:
        for value in (0, 1, 34, 35, 36, 600, 1224):
            assert from_base35(to_base35(value)) == value
