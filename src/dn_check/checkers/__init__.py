from .dns_checker import DNSChecker, Outcome, ResolveResult
from .availability_service import AvailabilityService, probe

__all__ = ['DNSChecker', 'Outcome', 'ResolveResult', 'AvailabilityService', 'probe']
