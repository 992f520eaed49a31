"""Async DNS resolver client shared by all concurrent probes."""

import logging

import dns.asyncresolver
import dns.exception
import dns.resolver

from domain_checker.errors import LookupFailure, NoRecordsFound

logger = logging.getLogger(__name__)

DNS_TIMEOUT = 2.0
DNS_ATTEMPTS = 2
# Cloudflare public DNS
UPSTREAM_NAMESERVERS = (
    "1.1.1.1",
    "1.0.0.1",
    "2606:4700:4700::1111",
    "2606:4700:4700::1001",
)


class ResolverClient:
    """Resolve NS and address records against a fixed upstream resolver.

    The client is configured once and never mutated afterwards, so a single
    instance can be awaited from any number of tasks at the same time.

    Args:
        nameservers: Upstream resolvers to query. Defaults to Cloudflare.
        timeout: Seconds to wait for a single query attempt.
        attempts: Number of attempts per lookup. The total time budget of a
            lookup is ``timeout * attempts``.
    """

    def __init__(
        self,
        nameservers: tuple[str, ...] | list[str] = UPSTREAM_NAMESERVERS,
        timeout: float = DNS_TIMEOUT,
        attempts: int = DNS_ATTEMPTS,
    ):
        self.resolver = dns.asyncresolver.Resolver(configure=False)
        self.resolver.nameservers = list(nameservers)
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout * attempts
        self.attempts = attempts

    async def lookup_nameservers(self, domain: str) -> list[str]:
        """Return the authoritative nameserver names for ``domain``.

        Raises:
            NoRecordsFound: NXDOMAIN or no NS records.
            LookupFailure: Any other resolution failure.
        """
        return await self._resolve(domain, "NS")

    async def lookup_addresses(self, domain: str) -> list[str]:
        """Return the IP addresses of ``domain``, IPv4 first.

        AAAA records are only queried when the name has no A records.

        Raises:
            NoRecordsFound: NXDOMAIN or neither A nor AAAA records.
            LookupFailure: Any other resolution failure.
        """
        try:
            return await self._resolve(domain, "A")
        except NoRecordsFound:
            return await self._resolve(domain, "AAAA")

    async def _resolve(self, domain: str, rdtype: str) -> list[str]:
        try:
            answer = await self.resolver.resolve(domain, rdtype)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer) as exc:
            raise NoRecordsFound(str(exc)) from exc
        except dns.exception.DNSException as exc:
            logger.debug(
                "%s lookup for %s failed after up to %d attempts: %s", rdtype, domain, self.attempts, exc
            )
            raise LookupFailure(str(exc) or type(exc).__name__) from exc

        records = [rdata.to_text() for rdata in answer]
        if not records:
            raise NoRecordsFound(f"no {rdtype} records for {domain}")
        return records
