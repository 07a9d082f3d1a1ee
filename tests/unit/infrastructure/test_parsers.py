"""Tests for the pretty-bytes inverse."""

from __future__ import annotations

import pytest

from sizesnapshot.domain.entities import InvalidSizeError, InvalidUnitError
from sizesnapshot.infrastructure.common.parsers import pretty_bytes_inverse


class TestPrettyBytesInverse:
    def test_bytes(self) -> None:
        assert pretty_bytes_inverse("500", "B") == 500

    def test_kilobytes(self) -> None:
        assert pretty_bytes_inverse("12", "kB") == 12_000

    def test_megabytes(self) -> None:
        assert pretty_bytes_inverse("3", "MB") == 3_000_000

    def test_gigabytes(self) -> None:
        assert pretty_bytes_inverse("1", "GB") == 10**9

    def test_terabytes(self) -> None:
        assert pretty_bytes_inverse("1", "TB") == 10**12

    def test_petabytes(self) -> None:
        assert pretty_bytes_inverse("2", "PB") == 2 * 10**15

    def test_fractional_kilobytes_are_exact(self) -> None:
        assert pretty_bytes_inverse("2.3", "kB") == 2300
        assert pretty_bytes_inverse("12.3", "kB") == 12300

    def test_fractional_megabytes(self) -> None:
        assert pretty_bytes_inverse("1.57", "MB") == 1_570_000

    def test_numeric_magnitude(self) -> None:
        assert pretty_bytes_inverse(40.2, "kB") == 40200
        assert pretty_bytes_inverse(7, "B") == 7

    def test_uses_base_1000_not_1024(self) -> None:
        assert pretty_bytes_inverse("1", "kB") == 1000

    def test_single_character_unit_has_no_prefix(self) -> None:
        # "b" is shorter than 2 chars, so its first char is not a prefix
        assert pretty_bytes_inverse("42", "b") == 42

    def test_only_prefix_letter_is_significant(self) -> None:
        assert pretty_bytes_inverse("1", "kb") == 1000
        assert pretty_bytes_inverse("1", "kiB") == 1000

    def test_sub_byte_result_rounds_half_up(self) -> None:
        assert pretty_bytes_inverse("0.0005", "kB") == 1
        assert pretty_bytes_inverse("0.0004", "kB") == 0

    @pytest.mark.parametrize("unit", ["QB", "KB", "mB", "XB", "EB"])
    def test_unrecognized_prefix_raises(self, unit: str) -> None:
        with pytest.raises(InvalidUnitError, match=f"'{unit[0]}'"):
            pretty_bytes_inverse("1", unit)

    def test_invalid_unit_is_invalid_size(self) -> None:
        with pytest.raises(InvalidSizeError):
            pretty_bytes_inverse("1", "Qb")

    def test_error_lists_allowed_prefixes(self) -> None:
        with pytest.raises(InvalidUnitError, match="'k', 'M', 'G', 'T', 'P'"):
            pretty_bytes_inverse("1", "Qb")

    @pytest.mark.parametrize("magnitude", ["", "abc", "1,5", "-3", "nan"])
    def test_invalid_magnitude_raises(self, magnitude: str) -> None:
        with pytest.raises(InvalidSizeError):
            pretty_bytes_inverse(magnitude, "kB")
