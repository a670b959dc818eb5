# mailguard/bulk.py
import csv
import io
import logging
import zipfile
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd.compdoc import CompDocError

from .verifier import EmailValidationResult, EmailValidator, get_default_validator, normalize_email

LOG = logging.getLogger("mailguard.bulk")

SUPPORTED_EXTENSIONS = (".csv", ".txt", ".xlsx", ".xls")
RESULT_HEADERS = ["email", "normalized", "result", "valid"]


@dataclass
class BulkRow:
    email: str
    normalized: str
    result: EmailValidationResult

    @property
    def valid(self) -> bool:
        return self.result is EmailValidationResult.valid

    def to_dict(self) -> dict:
        return {
            "email": self.email,
            "normalized": self.normalized,
            "result": self.result.value,
            "valid": self.valid,
        }


@dataclass
class BulkSummary:
    rows: List[BulkRow] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def counts(self) -> Dict[str, int]:
        c = Counter(r.result.value for r in self.rows)
        return {r.value: c.get(r.value, 0) for r in EmailValidationResult}

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "counts": self.counts,
            "results": [r.to_dict() for r in self.rows],
        }


# ---------------------------------------------------
# Parsers (first non-empty cell of each row)
# ---------------------------------------------------
# What the spreadsheet readers raise on content that is not a workbook
UNREADABLE_WORKBOOK_ERRORS = (
    zipfile.BadZipFile,
    InvalidFileException,
    KeyError,
    xlrd.XLRDError,
    CompDocError,
)


def _first_cell(cells) -> Optional[str]:
    for v in cells:
        if v is None:
            continue
        text = str(v).strip()
        if text:
            return text
    return None


def _collect(rows) -> List[str]:
    emails = []
    for row in rows:
        c = _first_cell(row or ())
        if c:
            emails.append(c)
    return emails


def parse_csv(content: bytes) -> List[str]:
    text = content.decode("utf-8-sig", errors="ignore")
    return _collect(csv.reader(io.StringIO(text)))


def parse_xlsx(content: bytes) -> List[str]:
    workbook = openpyxl.load_workbook(io.BytesIO(content), read_only=True)
    try:
        return _collect(workbook.active.iter_rows(values_only=True))
    finally:
        workbook.close()


def parse_xls(content: bytes) -> List[str]:
    sheet = xlrd.open_workbook(file_contents=content).sheet_by_index(0)
    return _collect([cell.value for cell in sheet.row(i)] for i in range(sheet.nrows))


def parse_upload(filename: Optional[str], content: bytes) -> List[str]:
    """Pick a parser by extension. Unsupported or unreadable files raise ValueError."""
    fname = (filename or "").lower()
    if not fname.endswith(SUPPORTED_EXTENSIONS):
        raise ValueError("Only CSV, TXT, XLSX, XLS allowed")
    if not fname.endswith((".xlsx", ".xls")):
        return parse_csv(content)

    parser = parse_xlsx if fname.endswith(".xlsx") else parse_xls
    try:
        return parser(content)
    except UNREADABLE_WORKBOOK_ERRORS as e:
        raise ValueError(f"Could not read {filename}: {e}") from e


# ---------------------------------------------------
# Validation
# ---------------------------------------------------
def validate_many(
    emails: Iterable[str],
    validator: Optional[EmailValidator] = None,
    dedupe: bool = True,
) -> BulkSummary:
    """
    Validate every address in order. With dedupe, addresses that normalize to the
    same value (trimmed, lowercased) are reported once, first occurrence wins.
    The normalized value is what gets validated.
    """
    validator = validator or get_default_validator()
    summary = BulkSummary()
    seen = set()
    for email in emails:
        normalized = normalize_email(email)
        if dedupe:
            if normalized in seen:
                continue
            seen.add(normalized)
        summary.rows.append(BulkRow(email=email, normalized=normalized, result=validator.validate(normalized)))

    LOG.info("Bulk validation done total=%d valid=%d", summary.total, summary.counts["valid"])
    return summary


# ---------------------------------------------------
# Export
# ---------------------------------------------------
def render_results(summary: BulkSummary, file_format: str = "csv") -> str:
    if file_format == "csv":
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(RESULT_HEADERS)
        for r in summary.rows:
            writer.writerow([r.email, r.normalized, r.result.value, r.valid])
        return buf.getvalue()

    if file_format == "txt":
        buf = io.StringIO()
        buf.write("\t".join(RESULT_HEADERS) + "\n")
        for r in summary.rows:
            buf.write(f"{r.email}\t{r.normalized}\t{r.result.value}\t{r.valid}\n")
        return buf.getvalue()

    raise ValueError(f"Unsupported file format: {file_format}")
