"""Probe many domains concurrently under a shared concurrency limit."""

import asyncio
import logging
from collections.abc import Callable, Sequence

from domain_checker.prober import DomainStatus, probe
from domain_checker.resolver import ResolverClient

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 10


async def probe_all(
    domains: Sequence[str],
    limit: int = DEFAULT_CONCURRENCY,
    *,
    client: ResolverClient | None = None,
    on_result: Callable[[DomainStatus], None] | None = None,
) -> list[DomainStatus]:
    """Probe every domain with at most ``limit`` probes in flight.

    A fixed pool of workers pulls domains from a shared queue, so a new probe
    only starts once a running one has finished both of its lookups.

    Args:
        domains: Domain names to check. Each entry yields exactly one status.
        limit: Maximum number of probes executing at once.
        client: Resolver to share between workers. Created on demand.
        on_result: Optional callback invoked as each probe completes.

    Returns:
        One DomainStatus per input domain, in completion order.

    Raises:
        ValueError: If ``limit`` is not a positive integer.
    """
    if limit < 1:
        raise ValueError(f"concurrency limit must be at least 1, got {limit}")
    if not domains:
        return []

    if client is None:
        client = ResolverClient()

    queue: asyncio.Queue[str] = asyncio.Queue()
    for domain in domains:
        queue.put_nowait(domain)

    results: list[DomainStatus] = []

    async def _worker(worker_id: int) -> None:
        while True:
            try:
                domain = queue.get_nowait()
            except asyncio.QueueEmpty:
                logger.debug("worker %d done", worker_id)
                return
            status = await probe(domain, client)
            results.append(status)
            if on_result is not None:
                on_result(status)

    workers = min(limit, len(domains))
    logger.debug("probing %d domains with %d workers", len(domains), workers)
    await asyncio.gather(*(_worker(i) for i in range(workers)))
    return results


def check_domains(
    domains: Sequence[str],
    limit: int = DEFAULT_CONCURRENCY,
    on_result: Callable[[DomainStatus], None] | None = None,
) -> list[DomainStatus]:
    """Synchronous wrapper around :func:`probe_all`."""
    return asyncio.run(probe_all(domains, limit, on_result=on_result))
