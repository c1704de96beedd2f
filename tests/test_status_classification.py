"""
Test suite for status classification and transaction records.
"""

import dataclasses

import pytest

from pulse.core.record import TransactionRecord
from pulse.core.status import (
    STATUS_MESSAGES,
    UNKNOWN_MESSAGE,
    TransactionStatus,
    classify,
    is_terminal,
)


# ============================================================================
# Test Classifier
# ============================================================================

class TestClassify:
    """Tests for mapping status codes to messages."""

    @pytest.mark.parametrize(
        "status,message",
        [
            ("CONFIRMED", "Transaction has been processed and confirmed"),
            ("PENDING", " Transaction is awaiting processing"),
            ("FAILED", "Transaction failed to process"),
            ("DNE", "Transaction does not exist"),
        ],
    )
    def test_known_statuses(self, status, message):
        assert classify(status) == message

    @pytest.mark.parametrize("status", ["anything-else", "", "confirmed", "REVERTED"])
    def test_unknown_status(self, status):
        """Unrecognized codes never raise."""
        assert classify(status) == UNKNOWN_MESSAGE == "Unknown"

    def test_accepts_enum_members(self):
        assert classify(TransactionStatus.FAILED) == "Transaction failed to process"

    def test_message_table_is_read_only(self):
        with pytest.raises(TypeError):
            STATUS_MESSAGES["CONFIRMED"] = "changed"


class TestTerminalStatuses:
    """Tests for which statuses end polling."""

    def test_only_pending_is_non_terminal(self):
        assert not TransactionStatus.PENDING.is_terminal
        assert TransactionStatus.CONFIRMED.is_terminal
        assert TransactionStatus.FAILED.is_terminal
        assert TransactionStatus.DNE.is_terminal

    def test_unknown_codes_are_terminal(self):
        assert is_terminal("SOMETHING_NEW") is True
        assert is_terminal("PENDING") is False


# ============================================================================
# Test Transaction Record
# ============================================================================

class TestTransactionRecord:
    """Tests for the TransactionRecord model."""

    def test_message_derived_from_status(self):
        record = TransactionRecord(tx_hash="abc", status="DNE")

        assert record.message == "Transaction does not exist"
        assert record.is_confirmed is False

    def test_enum_status_normalized(self):
        record = TransactionRecord(tx_hash="abc", status=TransactionStatus.CONFIRMED)

        assert record.status == "CONFIRMED"
        assert record.status == TransactionStatus.CONFIRMED
        assert record.is_confirmed is True

    def test_message_cannot_be_passed(self):
        with pytest.raises(TypeError):
            TransactionRecord(tx_hash="abc", status="CONFIRMED", message="custom")

    def test_record_is_immutable(self):
        record = TransactionRecord(tx_hash="abc", status="CONFIRMED")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.status = "FAILED"

    def test_to_dict_uses_service_field_names(self):
        record = TransactionRecord(tx_hash="abc", status="FAILED")

        assert record.to_dict() == {
            "tx_hash": "abc",
            "tx_status": "FAILED",
            "message": "Transaction failed to process",
        }
