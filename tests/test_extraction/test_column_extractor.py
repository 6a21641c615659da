"""
Tests for NumericColumnExtractor and sort_values.

Tests cover:
- Line splitting (LF, CRLF, CR, blank lines)
- First-field parsing (trimming, header rows, non-finite values)
- Byte decoding (BOM, invalid UTF-8)
- NoNumericDataError on empty / all-text input
- Sorter ordering and permutation properties
"""
import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from sorted_chart.extraction import NumericColumnExtractor, sort_values
from sorted_chart.errors import NoNumericDataError


@pytest.fixture
def extractor():
    return NumericColumnExtractor()


# ==================== TestExtractText ====================

class TestExtractText:
    """Test extract_text parsing rules."""

    def test_keeps_input_order(self, extractor):
        """Scenario A: values come out in file order."""
        result = extractor.extract_text("10\n5\n20\n")
        assert result.tolist() == [10.0, 5.0, 20.0]
        assert result.dtype == np.float64

    def test_skips_header_row(self, extractor):
        """Scenario B: non-numeric header line is skipped."""
        result = extractor.extract_text("value\n3\n1\n2\n")
        assert result.tolist() == [3.0, 1.0, 2.0]

    def test_mixed_line_endings(self, extractor):
        """CRLF, CR and LF all separate lines; blank lines are dropped."""
        result = extractor.extract_text("1\r\n2\r3\n\n\r\n4")
        assert result.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_uses_only_first_field(self, extractor):
        """Only column 0 is consulted."""
        result = extractor.extract_text("1,100,200\n2,abc\nfoo,3\n")
        assert result.tolist() == [1.0, 2.0]

    def test_trims_whitespace(self, extractor):
        """Whitespace around the first field is ignored."""
        result = extractor.extract_text("  4.5 ,x\n\t-2\t,y\n")
        assert result.tolist() == [4.5, -2.0]

    def test_number_formats(self, extractor):
        """Sign, leading/trailing decimal point and exponent are accepted."""
        result = extractor.extract_text("+7\n-2.5e3\n.5\n5.\n1E-2\n")
        assert result.tolist() == [7.0, -2500.0, 0.5, 5.0, 0.01]

    def test_rejects_non_finite_and_non_invariant(self, extractor):
        """nan, inf, overflow, underscores, hex and non-ASCII digits are skipped."""
        text = "nan\ninf\n-Infinity\n1e999\n1_000\n0x10\n٣\n3\n"
        result = extractor.extract_text(text)
        assert result.tolist() == [3.0]

    def test_rejects_accounting_and_currency_forms(self, extractor):
        """Parenthesised negatives, trailing signs and currency symbols are text."""
        text = "(5)\n5-\n¤5\n$5\n 1 000\n3\n"
        result = extractor.extract_text(text)
        assert result.tolist() == [3.0]

    def test_blank_first_field_is_skipped(self, extractor):
        result = extractor.extract_text(",1\n   ,2\n9,3\n")
        assert result.tolist() == [9.0]

    def test_empty_text_raises(self, extractor):
        """Scenario C: empty input has no numeric data."""
        with pytest.raises(NoNumericDataError, match="No numeric values"):
            extractor.extract_text("")

    def test_text_only_raises(self, extractor):
        with pytest.raises(NoNumericDataError):
            extractor.extract_text("value\nabc\nn/a\n")


# ==================== TestExtractBytes ====================

class TestExtractBytes:
    """Test extract_bytes decoding."""

    def test_strips_utf8_bom(self, extractor):
        result = extractor.extract_bytes(b"\xef\xbb\xbf1\n2\n")
        assert result.tolist() == [1.0, 2.0]

    def test_invalid_utf8_line_is_skipped(self, extractor):
        result = extractor.extract_bytes(b"\xff\xfe\n3\n")
        assert result.tolist() == [3.0]

    def test_empty_bytes_raise(self, extractor):
        with pytest.raises(NoNumericDataError):
            extractor.extract_bytes(b"")


# ==================== TestSortValues ====================

class TestSortValues:
    """Test the sorter."""

    def test_sorts_ascending(self):
        assert sort_values(np.array([10.0, 5.0, 20.0])).tolist() == [5.0, 10.0, 20.0]

    def test_does_not_mutate_input(self):
        values = np.array([3.0, 1.0, 2.0])
        sort_values(values)
        assert values.tolist() == [3.0, 1.0, 2.0]

    def test_non_decreasing_permutation(self):
        """Output is non-decreasing and holds the same multiset of values."""
        rng = np.random.default_rng(42)
        values = np.round(rng.normal(size=200), 1)  # rounding forces duplicates
        result = sort_values(values)

        assert np.all(result[:-1] <= result[1:])
        assert sorted(values.tolist()) == result.tolist()

    def test_empty_input_raises(self):
        with pytest.raises(NoNumericDataError):
            sort_values(np.array([]))
