"""Domain Checker - find out whether domain names are registered via DNS."""

__version__ = "0.1.0"

from domain_checker.coordinator import check_domains, probe_all
from domain_checker.prober import DomainStatus, probe
from domain_checker.report import CheckReport, Summary, build_report, filter_unregistered_only
from domain_checker.resolver import ResolverClient

__all__ = [
    "CheckReport",
    "DomainStatus",
    "ResolverClient",
    "Summary",
    "build_report",
    "check_domains",
    "filter_unregistered_only",
    "probe",
    "probe_all",
]
