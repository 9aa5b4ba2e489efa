"""
Tests for batch encoding helpers.
"""

from structlog.testing import capture_logs

from jancode.barcode.batch import encode_batch, parse_code_list, try_encode
from jancode.models.encoding import BarcodeSymbology, RejectionReason


class TestParseCodeList:
    """Tests for splitting pasted input."""

    def test_strips_and_drops_blank_lines(self):
        """Test whitespace trimming and blank line removal."""
        text = "  4912345678904 \n\n1234567\r\n   \n\t96385074"
        assert parse_code_list(text) == ["4912345678904", "1234567", "96385074"]

    def test_empty(self):
        """Test that empty input yields no codes."""
        assert parse_code_list("") == []
        assert parse_code_list("\n  \n") == []

    def test_keeps_invalid_codes(self):
        """Test that validation is left to the encoder."""
        assert parse_code_list("12a4\n") == ["12a4"]


class TestTryEncode:
    """Tests for try_encode."""

    def test_success(self):
        """Test a successful encoding result."""
        result = try_encode("012345678905")
        assert result.is_valid
        assert result.symbols == "a012345KRSTULQZ"
        assert result.normalized_code == "0012345678905"
        assert result.symbology == BarcodeSymbology.UPC_A
        assert result.error is None

    def test_rejection(self):
        """Test that rejections are returned, not raised."""
        result = try_encode("4912345678901")
        assert not result.is_valid
        assert result.symbols is None
        assert result.error == RejectionReason.CHECKSUM_MISMATCH
        assert result.message

    def test_rejection_before_dispatch(self):
        """Test that malformed codes have no normalized form."""
        result = try_encode("12a4")
        assert result.error == RejectionReason.NON_NUMERIC_INPUT
        assert result.normalized_code is None
        assert result.symbology == BarcodeSymbology.UNKNOWN


class TestEncodeBatch:
    """Tests for encode_batch."""

    def test_skips_and_continues(self):
        """Test that bad codes are skipped without stopping the batch."""
        codes = ["4912345678904", "", "12a4", "4912345678901", "12345", "1234567"]
        report = encode_batch(codes)

        assert [r.code for r in report.results] == codes
        assert report.encoded_count == 2
        assert report.skipped_count == 4
        assert [r.symbols for r in report.encoded] == ["X9B23EFKRSTULPZ", "Y0123KPQRQZ"]
        assert [r.error for r in report.skipped] == [
            RejectionReason.EMPTY_INPUT,
            RejectionReason.NON_NUMERIC_INPUT,
            RejectionReason.CHECKSUM_MISMATCH,
            RejectionReason.UNSUPPORTED_LENGTH,
        ]

    def test_order_independent(self):
        """Test that each result depends only on its own code."""
        codes = ["96385074", "4912345678904", "bad", "1234567"]
        forward = {r.code: r.symbols for r in encode_batch(codes).results}
        backward = {r.code: r.symbols for r in encode_batch(reversed(codes)).results}
        assert forward == backward

    def test_empty_batch(self):
        """Test an empty batch."""
        report = encode_batch([])
        assert report.results == ()
        assert report.encoded_count == 0
        assert report.skipped_count == 0

    def test_logs_skipped_codes(self):
        """Test that rejections and the summary are logged."""
        with capture_logs() as logs:
            encode_batch(["4912345678904", "4912345678901"])

        warnings = [log for log in logs if log["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["code"] == "4912345678901"
        assert warnings[0]["reason"] == "checksum_mismatch"

        summary = [log for log in logs if log["event"] == "Batch encoded"]
        assert summary[0]["encoded"] == 1
        assert summary[0]["skipped"] == 1
