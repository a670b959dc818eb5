"""
Tests for bulk list parsing, validation and export.
"""

import io

import openpyxl
import pytest

from mailguard.bulk import (
    BulkSummary,
    parse_csv,
    parse_upload,
    parse_xlsx,
    render_results,
    validate_many,
)
from mailguard.verifier import EmailValidationResult


def _xlsx_bytes(rows):
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


class TestParsers:

    def test_parse_csv_first_non_empty_cell(self):
        content = b"user@example.com,Alice\n,  second@example.org ,x\n\n , \n"
        assert parse_csv(content) == ["user@example.com", "second@example.org"]

    def test_parse_csv_strips_bom(self):
        content = "\ufeffuser@example.com\n".encode("utf-8")
        assert parse_csv(content) == ["user@example.com"]

    def test_parse_txt_one_per_line(self):
        assert parse_upload("list.TXT", b"a@b.co\nc@d.org\n") == ["a@b.co", "c@d.org"]

    def test_parse_xlsx(self):
        content = _xlsx_bytes([["a@b.co", "name"], [None, "c@d.org"], [None, None]])
        assert parse_xlsx(content) == ["a@b.co", "c@d.org"]
        assert parse_upload("list.xlsx", content) == ["a@b.co", "c@d.org"]

    def test_parse_upload_dispatches_xls(self, monkeypatch):
        calls = []
        monkeypatch.setattr("mailguard.bulk.parse_xls", lambda content: calls.append(content) or ["x@y.com"])

        assert parse_upload("legacy.xls", b"raw") == ["x@y.com"]
        assert calls == [b"raw"]

    @pytest.mark.parametrize("filename", ["emails.xlsx", "emails.xls"])
    def test_parse_upload_unreadable_workbook(self, filename):
        with pytest.raises(ValueError, match=f"Could not read {filename}"):
            parse_upload(filename, b"not a zip")

    def test_parse_xlsx_skips_blank_cells(self):
        content = _xlsx_bytes([["   ", "a@b.co"], [None, " c@d.org "]])
        assert parse_xlsx(content) == ["a@b.co", "c@d.org"]

    @pytest.mark.parametrize("filename", ["emails.json", "emails", "", None])
    def test_parse_upload_rejects_other_extensions(self, filename):
        with pytest.raises(ValueError):
            parse_upload(filename, b"a@b.co")


class TestValidateMany:

    def test_results_in_order(self, small_validator):
        summary = validate_many(["a@b.co", "bad", "x@y.io"], validator=small_validator)

        assert [r.result for r in summary.rows] == [
            EmailValidationResult.valid,
            EmailValidationResult.invalid_format,
            EmailValidationResult.invalid_tld,
        ]
        assert summary.total == 3
        assert summary.rows[0].valid is True

    def test_dedupe_on_normalized(self, small_validator):
        summary = validate_many(["a@b.co", "A@B.CO", "a@b.co"], validator=small_validator)

        assert summary.total == 1
        assert summary.rows[0].email == "a@b.co"

    def test_padded_duplicate_does_not_hide_valid_address(self, small_validator):
        summary = validate_many([" a@b.co", "a@b.co"], validator=small_validator)

        assert summary.total == 1
        assert summary.rows[0].email == " a@b.co"
        assert summary.rows[0].normalized == "a@b.co"
        assert summary.rows[0].result is EmailValidationResult.valid

    def test_keep_duplicates(self, small_validator):
        summary = validate_many(["a@b.co", "A@B.CO"], validator=small_validator, dedupe=False)
        assert summary.total == 2

    def test_counts_include_every_outcome(self, small_validator):
        summary = validate_many([".a@b.co", "a@b.co"], validator=small_validator)

        assert summary.counts == {
            "valid": 1,
            "invalid_format": 0,
            "rfc_violation": 1,
            "invalid_tld": 0,
        }

    def test_uses_default_validator(self):
        summary = validate_many(["user@example.com"])
        assert summary.rows[0].result is EmailValidationResult.valid

    def test_to_dict(self, small_validator):
        data = validate_many(["a@b.co"], validator=small_validator).to_dict()

        assert data["total"] == 1
        assert data["results"] == [
            {"email": "a@b.co", "normalized": "a@b.co", "result": "valid", "valid": True}
        ]


class TestRenderResults:

    def test_csv(self, small_validator):
        summary = validate_many(["a@b.co", "nope"], validator=small_validator)
        lines = render_results(summary, "csv").splitlines()

        assert lines[0] == "email,normalized,result,valid"
        assert lines[1] == "a@b.co,a@b.co,valid,True"
        assert lines[2] == "nope,nope,invalid_format,False"

    def test_txt(self, small_validator):
        summary = validate_many(["a@b.co"], validator=small_validator)
        lines = render_results(summary, "txt").splitlines()

        assert lines == ["email\tnormalized\tresult\tvalid", "a@b.co\ta@b.co\tvalid\tTrue"]

    def test_empty_summary(self):
        assert render_results(BulkSummary(), "csv").splitlines() == ["email,normalized,result,valid"]

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            render_results(BulkSummary(), "xml")
