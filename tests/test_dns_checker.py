"""Tests for the DNS resolver adapter."""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import dns.exception
import dns.name
import dns.resolver
import pytest

from dn_check.checkers.dns_checker import DNSChecker, Outcome, classify_error
from dn_check.exceptions import ConfigError


class TestClassifyError:
    """Mapping of resolution failures to outcomes."""

    def test_nxdomain_means_not_found(self):
        assert classify_error(dns.resolver.NXDOMAIN()).outcome is Outcome.NOT_FOUND

    def test_no_answer_means_registered(self):
        """The name exists even without a record of the queried type."""
        assert classify_error(dns.resolver.NoAnswer()).outcome is Outcome.REGISTERED

    def test_no_nameservers_is_transient(self):
        result = classify_error(dns.resolver.NoNameservers())
        assert result.outcome is Outcome.TRANSIENT_ERROR
        assert "no nameserver answered" in result.detail

    def test_timeout_is_transient(self):
        result = classify_error(dns.exception.Timeout())
        assert result.outcome is Outcome.TRANSIENT_ERROR
        assert "timed out" in result.detail

    def test_malformed_name_is_transient(self):
        result = classify_error(dns.name.EmptyLabel())
        assert result.outcome is Outcome.TRANSIENT_ERROR
        assert "malformed" in result.detail

    def test_network_error_is_transient(self):
        result = classify_error(OSError(101, "Network is unreachable"))
        assert result.is_error
        assert "unreachable" in result.detail

    def test_unrelated_exception_propagates(self):
        with pytest.raises(RuntimeError):
            classify_error(RuntimeError("boom"))


class TestDNSChecker:
    """Test cases for DNSChecker."""

    def test_initialization_with_nameservers(self):
        nameservers = ["8.8.8.8", "1.1.1.1"]
        checker = DNSChecker(nameservers=nameservers, timeout=2.0)
        assert checker.resolver.nameservers == nameservers
        assert checker.async_resolver.nameservers == nameservers
        assert checker.resolver.timeout == 2.0
        assert checker.resolver.lifetime == 2.0
        assert checker.async_resolver.lifetime == 2.0

    def test_missing_system_configuration(self):
        with patch.object(
            dns.resolver.Resolver, 'read_resolv_conf',
            side_effect=dns.resolver.NoResolverConfiguration()
        ):
            with pytest.raises(ConfigError):
                DNSChecker()

    def test_check_single_registered(self):
        checker = DNSChecker(nameservers=["127.0.0.1"])
        checker.resolver = Mock()
        checker.resolver.resolve.return_value = ["93.184.216.34"]
        assert checker.check_single("example.com").outcome is Outcome.REGISTERED
        checker.resolver.resolve.assert_called_once_with("example.com", "A")

    def test_check_single_not_found(self):
        checker = DNSChecker(nameservers=["127.0.0.1"])
        checker.resolver = Mock()
        checker.resolver.resolve.side_effect = dns.resolver.NXDOMAIN()
        assert checker.check_single("sun4everyone.tj").outcome is Outcome.NOT_FOUND

    def test_resolve_uses_record_type(self):
        checker = DNSChecker(nameservers=["127.0.0.1"], record_type="AAAA")
        checker.async_resolver = Mock()
        checker.async_resolver.resolve = AsyncMock(return_value=["::1"])
        result = asyncio.run(checker.resolve("example.com"))
        assert result.outcome is Outcome.REGISTERED
        checker.async_resolver.resolve.assert_awaited_once_with("example.com", "AAAA")

    def test_resolve_timeout_is_not_availability(self):
        checker = DNSChecker(nameservers=["127.0.0.1"])
        checker.async_resolver = Mock()
        checker.async_resolver.resolve = AsyncMock(side_effect=dns.exception.Timeout())
        result = asyncio.run(checker.resolve("example.com"))
        assert result.outcome is Outcome.TRANSIENT_ERROR

    def test_resolve_propagates_unexpected_errors(self):
        checker = DNSChecker(nameservers=["127.0.0.1"])
        checker.async_resolver = Mock()
        checker.async_resolver.resolve = AsyncMock(side_effect=MemoryError())
        with pytest.raises(MemoryError):
            asyncio.run(checker.resolve("example.com"))
