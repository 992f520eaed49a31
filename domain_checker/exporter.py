"""Serialise check reports to JSON, JSONL or CSV."""

import csv
import json
import logging
from pathlib import Path

from domain_checker.prober import DomainStatus
from domain_checker.report import CheckReport

logger = logging.getLogger(__name__)

FIELD_DOMAIN = "domain"
FIELD_REGISTERED = "registered"
FIELD_HAS_NS = "hasNameserverRecords"
FIELD_HAS_ADDRESS = "hasAddressRecords"
FIELD_NAMESERVERS = "nameservers"
FIELD_ADDRESSES = "addresses"
FIELD_ERROR = "error"
STATUS_FIELDS = (
    FIELD_DOMAIN,
    FIELD_REGISTERED,
    FIELD_HAS_NS,
    FIELD_HAS_ADDRESS,
    FIELD_NAMESERVERS,
    FIELD_ADDRESSES,
    FIELD_ERROR,
)
CSV_LIST_SEPARATOR = ";"
EXPORT_EXTENSIONS = (".json", ".jsonl", ".csv")


def status_to_dict(status: DomainStatus) -> dict:
    """Build the structured document for a single domain."""
    return {
        FIELD_DOMAIN: status.domain,
        FIELD_REGISTERED: status.registered,
        FIELD_HAS_NS: status.has_nameserver_records,
        FIELD_HAS_ADDRESS: status.has_address_records,
        FIELD_NAMESERVERS: list(status.nameservers),
        FIELD_ADDRESSES: list(status.addresses),
        FIELD_ERROR: status.error,
    }


def report_to_dict(report: CheckReport) -> dict:
    """Build the structured document for a whole report."""
    return {
        "timestamp": report.timestamp,
        "domainCount": report.domain_count,
        "domains": [status_to_dict(s) for s in report.domains],
        "summary": {
            "totalChecked": report.summary.total_checked,
            "registeredCount": report.summary.registered_count,
            "unregisteredCount": report.summary.unregistered_count,
            "errorCount": report.summary.error_count,
        },
    }


def is_supported_output(output_path: str) -> bool:
    """Return True if the file extension selects a known export format."""
    return Path(output_path).suffix.lower() in EXPORT_EXTENSIONS


def render_json(report: CheckReport) -> str:
    return json.dumps(report_to_dict(report), indent=2)


def export_report(report: CheckReport, output_path: str) -> None:
    """Export a report to a file. Format is auto-detected from extension.

    Args:
        report: The report to write.
        output_path: Path to output file (.json, .jsonl, or .csv).

    Raises:
        ValueError: If the file extension is not .json, .jsonl, or .csv.
    """
    path = Path(output_path)
    ext = path.suffix.lower()

    if ext == ".json":
        path.write_text(render_json(report) + "\n")
    elif ext == ".jsonl":
        _export_jsonl(report, path)
    elif ext == ".csv":
        _export_csv(report, path)
    else:
        raise ValueError(f"Unsupported file format '{ext}'. Use .json, .jsonl, or .csv.")
    logger.debug("wrote %d domains to %s", report.domain_count, path)


def _export_jsonl(report: CheckReport, path: Path) -> None:
    """Export one JSON document per domain."""
    lines = [json.dumps(status_to_dict(s)) for s in report.domains]
    path.write_text("\n".join(lines) + "\n" if lines else "")


def _csv_row(status: DomainStatus) -> dict:
    row = status_to_dict(status)
    row[FIELD_NAMESERVERS] = CSV_LIST_SEPARATOR.join(status.nameservers)
    row[FIELD_ADDRESSES] = CSV_LIST_SEPARATOR.join(status.addresses)
    row[FIELD_ERROR] = status.error or ""
    return row


def _export_csv(report: CheckReport, path: Path) -> None:
    """Export one CSV row per domain."""
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(STATUS_FIELDS))
        writer.writeheader()
        for status in report.domains:
            writer.writerow(_csv_row(status))
