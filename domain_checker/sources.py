"""Collect domain names from command-line arguments and line streams."""

from collections.abc import Iterable
from typing import TextIO

from domain_checker.errors import EmptyInputError


def normalize_domain(name: str) -> str:
    """Lowercase a domain name and drop surrounding whitespace and the root dot."""
    name = name.strip().lower()
    if name.endswith("."):
        name = name[:-1]
    return name


def read_domains(stream: TextIO) -> list[str]:
    """Read one domain per line, skipping blank lines and ``#`` comments."""
    domains: list[str] = []
    for line in stream:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        domains.append(line)
    return domains


def collect_domains(args_domains: Iterable[str], streams: Iterable[TextIO] = ()) -> list[str]:
    """Merge domains from arguments and streams, first occurrence wins.

    Raises:
        EmptyInputError: If no domain remains after normalisation.
    """
    candidates = list(args_domains)
    for stream in streams:
        candidates.extend(read_domains(stream))

    domains: list[str] = []
    seen: set[str] = set()
    for candidate in candidates:
        domain = normalize_domain(candidate)
        if not domain or domain in seen:
            continue
        seen.add(domain)
        domains.append(domain)

    if not domains:
        raise EmptyInputError("no domains to check")
    return domains
