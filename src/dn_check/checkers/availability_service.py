"""Concurrent availability checks for every name across every TLD."""

import asyncio
import logging
from typing import Callable, Iterable, List, Optional

from .dns_checker import DNSChecker, Outcome, ResolveResult
from ..exceptions import IncompleteRunError
from ..models import ProbeRequest, ResultSet, TLDVerdict
from ..utils.aggregator import ResultAggregator, non_blank

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


async def probe(resolver, request: ProbeRequest, timeout: Optional[float] = None) -> Optional[TLDVerdict]:
    """Check one name under one TLD.

    Returns the verdict, or None when the lookup failed for a reason that
    says nothing about registration (timeout, server failure, ...). Such
    failures are logged, never raised.
    """
    fqdn = request.fqdn
    try:
        if timeout is None:
            result = await resolver.resolve(fqdn)
        else:
            result = await asyncio.wait_for(resolver.resolve(fqdn), timeout)
    except asyncio.TimeoutError:
        result = ResolveResult(Outcome.TRANSIENT_ERROR, f"no answer within {timeout}s")

    if result.outcome is Outcome.REGISTERED:
        return TLDVerdict(tld=request.tld, available=False)
    if result.outcome is Outcome.NOT_FOUND:
        return TLDVerdict(tld=request.tld, available=True)

    logger.warning("Error checking availability for %s: %s", fqdn, result.detail)
    return None


class AvailabilityService:
    """Fans out one probe per (name, tld) pair and gathers the verdicts."""

    # Extra time a probe gets on top of the resolver lifetime before it is
    # abandoned as a transient error
    DEADLINE_GRACE = 1.0

    def __init__(
        self,
        resolver=None,
        timeout: float = 3.0,
        max_concurrent: int = 20,
        nameservers: Optional[List[str]] = None,
        record_type: str = "A",
        deadline: Optional[float] = None
    ):
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self.resolver = resolver if resolver is not None else DNSChecker(
            timeout=timeout, nameservers=nameservers, record_type=record_type
        )
        self.max_concurrent = max_concurrent
        self.deadline = deadline if deadline is not None else timeout + self.DEADLINE_GRACE

    @staticmethod
    def build_requests(names: Iterable[str], tlds: Iterable[str]) -> List[ProbeRequest]:
        """Cross product of non-blank names and TLDs, duplicates included."""
        tlds = list(tlds)
        return [ProbeRequest(name, tld) for name in non_blank(names) for tld in tlds]

    async def run_async(
        self,
        names: Iterable[str],
        tlds: Iterable[str],
        progress_callback: Optional[ProgressCallback] = None
    ) -> ResultSet:
        """Probe every pair concurrently and return once all have finished.

        At most ``max_concurrent`` lookups are in flight at a time. A
        transient failure only drops the verdict for its pair. Anything
        else, including cancellation, stops the run and raises
        IncompleteRunError with the verdicts gathered so far.
        """
        names = list(names)
        tlds = list(tlds)
        if not tlds:
            raise ValueError("at least one TLD is required")

        aggregator = ResultAggregator(names, tlds)
        requests = self.build_requests(names, tlds)
        total = len(requests)
        semaphore = asyncio.Semaphore(self.max_concurrent)

        logger.debug(
            "Dispatching %d probes (%d names x %d TLDs), %d at a time",
            total, total // len(tlds), len(tlds), self.max_concurrent
        )

        async def bounded(request: ProbeRequest):
            async with semaphore:
                return request, await probe(self.resolver, request, timeout=self.deadline)

        tasks: List[asyncio.Task] = []
        completed = 0
        try:
            tasks.extend(asyncio.ensure_future(bounded(r)) for r in requests)
            for next_done in asyncio.as_completed(tasks):
                request, verdict = await next_done
                aggregator.accumulate(request.name, verdict)
                completed += 1
                if progress_callback:
                    progress_callback(completed, total)
        except (Exception, asyncio.CancelledError) as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            partial = aggregator.finalize(complete=False)
            logger.error("Run aborted after %d of %d probes: %r", completed, total, e)
            raise IncompleteRunError(
                f"run aborted after {completed} of {total} probes", partial
            ) from e

        stats = aggregator.stats()
        logger.debug(
            "Finished %d probes: %d verdicts, %d without verdict",
            stats['received'], stats['verdicts'], stats['without_verdict']
        )
        return aggregator.finalize()

    def run(
        self,
        names: Iterable[str],
        tlds: Iterable[str],
        progress_callback: Optional[ProgressCallback] = None
    ) -> ResultSet:
        """Synchronous wrapper for run_async."""
        return asyncio.run(self.run_async(names, tlds, progress_callback))
