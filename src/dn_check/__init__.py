"""dn-check - Check domain name availability across TLDs."""

__version__ = "0.1.0"

from .checkers import AvailabilityService, DNSChecker
from .models import NameResult, ResultSet, TLDVerdict

__all__ = ['AvailabilityService', 'DNSChecker', 'NameResult', 'ResultSet', 'TLDVerdict']
