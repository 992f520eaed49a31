"""Probe a single domain and classify it as registered or not."""

import logging
from dataclasses import dataclass, replace

from domain_checker.errors import DnsLookupError, LookupFailure, NoRecordsFound
from domain_checker.resolver import ResolverClient

logger = logging.getLogger(__name__)

NS_ERROR_PREFIX = "NS lookup error: "
IP_ERROR_PREFIX = "IP lookup error: "


@dataclass(frozen=True)
class DomainStatus:
    domain: str
    registered: bool = False
    has_nameserver_records: bool = False
    has_address_records: bool = False
    nameservers: tuple[str, ...] = ()
    addresses: tuple[str, ...] = ()
    error: str | None = None


# A lookup outcome is either the records it returned or the error it raised.
LookupOutcome = list[str] | DnsLookupError


@dataclass(frozen=True)
class ProbeState:
    """Immutable state of a probe between its two lookups.

    Each transition returns a new state; a registered domain never carries
    an error, and while unregistered only the most recent lookup failure is
    kept.
    """

    domain: str
    has_nameserver_records: bool = False
    has_address_records: bool = False
    nameservers: tuple[str, ...] = ()
    addresses: tuple[str, ...] = ()
    error: str | None = None

    @property
    def registered(self) -> bool:
        return self.has_nameserver_records or self.has_address_records

    def after_nameservers(self, outcome: LookupOutcome) -> "ProbeState":
        if isinstance(outcome, list):
            return replace(
                self,
                has_nameserver_records=True,
                nameservers=tuple(outcome),
                error=None,
            )
        return self._after_failure(outcome, NS_ERROR_PREFIX)

    def after_addresses(self, outcome: LookupOutcome) -> "ProbeState":
        if isinstance(outcome, list):
            return replace(
                self,
                has_address_records=True,
                addresses=tuple(outcome),
                error=None,
            )
        return self._after_failure(outcome, IP_ERROR_PREFIX)

    def _after_failure(self, exc: DnsLookupError, prefix: str) -> "ProbeState":
        if isinstance(exc, NoRecordsFound) or self.registered:
            return self
        message = exc.message if isinstance(exc, LookupFailure) else str(exc)
        return replace(self, error=prefix + message)

    def finish(self) -> DomainStatus:
        return DomainStatus(
            domain=self.domain,
            registered=self.registered,
            has_nameserver_records=self.has_nameserver_records,
            has_address_records=self.has_address_records,
            nameservers=self.nameservers,
            addresses=self.addresses,
            error=self.error,
        )


async def _outcome(lookup, domain: str) -> LookupOutcome:
    try:
        return await lookup(domain)
    except DnsLookupError as exc:
        return exc


async def probe(domain: str, client: ResolverClient) -> DomainStatus:
    """Check a single domain via an NS lookup followed by an address lookup.

    A domain is registered if either lookup returns at least one record.
    ``NoRecordsFound`` is never reported. Any other failure is recorded in
    ``error`` only while the domain is still unregistered, and a later
    failure replaces an earlier one.
    """
    state = ProbeState(domain)
    state = state.after_nameservers(await _outcome(client.lookup_nameservers, domain))
    state = state.after_addresses(await _outcome(client.lookup_addresses, domain))
    status = state.finish()
    logger.debug(
        "%s: registered=%s ns=%d ip=%d error=%s",
        domain,
        status.registered,
        len(status.nameservers),
        len(status.addresses),
        status.error,
    )
    return status
