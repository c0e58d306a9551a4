import pytest

from gbranch.records import (
    FOR_EACH_REF_FORMAT,
    DecodeError,
    RefRecord,
    decode_records,
    encode_records,
)
from tests.conftest import make_record, make_remote_record


class TestFormat:
    def test_fields_are_nul_separated_and_sentinel_terminated(self):
        assert FOR_EACH_REF_FORMAT == (
            "%(refname)%00%(refname:short)%00%(upstream:short)%00%(objectname)%00"
            "%(author)%00%(parent)%00%(subject)%00%(body)%00%1F"
        )


class TestDecodeRecords:
    def test_single_record(self):
        raw = "refs/heads/main\0main\0\0abc123\0Jane <j@x.com> 1700000000 +0000\0\0Initial commit\0\0\x1f\n"

        assert decode_records(raw) == [
            RefRecord(
                ref="refs/heads/main",
                name="main",
                upstream="",
                sha="abc123",
                author="Jane <j@x.com> 1700000000 +0000",
                parents="",
                summary="Initial commit",
                body="",
            )
        ]

    def test_empty_output(self):
        assert decode_records("") == []

    @pytest.mark.parametrize("k", [1, 2, 5])
    def test_k_records_yield_k_tuples_of_eight(self, k):
        records = [make_record(name=f"branch-{i}") for i in range(k)]

        decoded = decode_records(encode_records(records))

        assert len(decoded) == k
        assert all(len(record) == 8 for record in decoded)

    def test_multiline_body_does_not_split_records(self):
        records = [
            make_record(body="First paragraph.\n\nSecond paragraph.\n"),
            make_remote_record(body="\nleading newline"),
        ]

        assert decode_records(encode_records(records)) == records

    def test_trailing_artifact_is_ignored(self):
        raw = encode_records([make_record()]).removesuffix("\n") + "junk"

        assert decode_records(raw) == [make_record()]

    def test_missing_field_is_an_error(self):
        raw = "refs/heads/main\0main\0\0abc123\0\x1f\n"

        with pytest.raises(DecodeError, match="Expected 8 fields"):
            decode_records(raw)

    def test_extra_field_is_an_error(self):
        raw = encode_records([make_record()]).replace("\0\x1f", "\0extra\0\x1f")

        with pytest.raises(DecodeError):
            decode_records(raw)

    def test_mismatch_in_later_record_is_an_error(self):
        raw = encode_records([make_record()]) + "refs/heads/x\0x\0\x1f\n"

        with pytest.raises(DecodeError, match="record 1"):
            decode_records(raw)
