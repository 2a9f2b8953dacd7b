"""DNS-based domain availability checker."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import dns.asyncresolver
import dns.exception
import dns.resolver

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """What a lookup says about a fully qualified name."""
    REGISTERED = "registered"
    NOT_FOUND = "not_found"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of one lookup, with the error detail for transient failures."""
    outcome: Outcome
    detail: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.outcome is Outcome.TRANSIENT_ERROR


REGISTERED = ResolveResult(Outcome.REGISTERED)
NOT_FOUND = ResolveResult(Outcome.NOT_FOUND)


def classify_error(exc: BaseException) -> ResolveResult:
    """Map a resolution failure to an outcome.

    Only NXDOMAIN means the name does not exist. A server failure, a
    timeout or an unreachable network says nothing about registration and
    is reported as a transient error. Exceptions that are not resolution
    failures are re-raised.
    """
    if isinstance(exc, dns.resolver.NXDOMAIN):
        return NOT_FOUND
    if isinstance(exc, dns.resolver.NoAnswer):
        # The name exists, it just has no record of the queried type
        return REGISTERED
    if isinstance(exc, dns.resolver.NoNameservers):
        return ResolveResult(Outcome.TRANSIENT_ERROR, f"no nameserver answered: {exc}")
    if isinstance(exc, dns.exception.Timeout):
        return ResolveResult(Outcome.TRANSIENT_ERROR, f"timed out: {exc}")
    if isinstance(exc, dns.exception.SyntaxError):
        return ResolveResult(Outcome.TRANSIENT_ERROR, f"malformed query: {exc}")
    if isinstance(exc, (dns.exception.DNSException, OSError)):
        return ResolveResult(Outcome.TRANSIENT_ERROR, str(exc) or type(exc).__name__)
    raise exc


class DNSChecker:
    """Resolves names and classifies them as registered, free or unknown."""

    def __init__(
        self,
        timeout: float = 3.0,
        nameservers: Optional[List[str]] = None,
        record_type: str = "A"
    ):
        self.timeout = timeout
        self.record_type = record_type
        self.resolver = self._configure(dns.resolver.Resolver, nameservers)
        self.async_resolver = self._configure(dns.asyncresolver.Resolver, nameservers)

    def _configure(self, factory, nameservers: Optional[List[str]]):
        try:
            resolver = factory(configure=not nameservers)
        except dns.resolver.NoResolverConfiguration as e:
            raise ConfigError(f"No system resolver configuration, pass nameservers explicitly: {e}") from e
        if nameservers:
            resolver.nameservers = list(nameservers)
        resolver.timeout = self.timeout
        resolver.lifetime = self.timeout
        return resolver

    def check_single(self, fqdn: str) -> ResolveResult:
        """Look up a single name, blocking until the resolver answers."""
        try:
            self.resolver.resolve(fqdn, self.record_type)
        except (dns.exception.DNSException, OSError) as e:
            return classify_error(e)
        return REGISTERED

    async def resolve(self, fqdn: str) -> ResolveResult:
        """Look up a single name without blocking the event loop."""
        try:
            await self.async_resolver.resolve(fqdn, self.record_type)
        except (dns.exception.DNSException, OSError) as e:
            result = classify_error(e)
            logger.debug("%s -> %s (%s)", fqdn, result.outcome.value, type(e).__name__)
            return result
        logger.debug("%s -> %s", fqdn, Outcome.REGISTERED.value)
        return REGISTERED
