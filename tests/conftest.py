"""Shared fixtures: a scriptable resolver that never touches the network."""

import asyncio
from typing import Callable, Dict, Optional

import pytest

from dn_check.checkers.dns_checker import NOT_FOUND, REGISTERED, Outcome, ResolveResult


class StubResolver:
    """Async resolver returning outcomes chosen by the test.

    ``rule`` maps an FQDN to a ResolveResult (or an exception to raise).
    ``delays`` holds per-FQDN sleep times to reorder completions.
    """

    def __init__(self, rule: Optional[Callable] = None, delays: Optional[Dict[str, float]] = None):
        self.rule = rule or (lambda fqdn: NOT_FOUND)
        self.delays = delays or {}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def resolve(self, fqdn: str) -> ResolveResult:
        self.calls.append(fqdn)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(fqdn, 0))
            outcome = self.rule(fqdn)
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome
        finally:
            self.in_flight -= 1


def by_name(registered=(), errors=()):
    """Rule: names in ``registered`` resolve, ``errors`` fail, the rest are free."""
    def rule(fqdn):
        name = fqdn.split('.')[0]
        if name in errors or fqdn in errors:
            return ResolveResult(Outcome.TRANSIENT_ERROR, "server failure")
        if name in registered or fqdn in registered:
            return REGISTERED
        return NOT_FOUND
    return rule


@pytest.fixture
def make_resolver():
    return StubResolver


@pytest.fixture
def name_rule():
    return by_name
