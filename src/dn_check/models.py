"""Value types shared by the checkers, the aggregator and the output layer."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class ProbeRequest:
    """One (name, tld) pair submitted to the scheduler."""
    name: str
    tld: str

    @property
    def fqdn(self) -> str:
        return f"{self.name}.{self.tld}"


@dataclass(frozen=True)
class TLDVerdict:
    """Availability of one name under one TLD."""
    tld: str
    available: bool

    def to_dict(self) -> Dict[str, Any]:
        return {'tld': self.tld, 'is_available': self.available}


@dataclass(frozen=True)
class NameResult:
    """All verdicts gathered for a single input name."""
    name: str
    verdicts: Tuple[TLDVerdict, ...] = ()

    def verdict_for(self, tld: str) -> Optional[TLDVerdict]:
        """Return the first verdict recorded for ``tld``, if any."""
        for verdict in self.verdicts:
            if verdict.tld == tld:
                return verdict
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'tlds': [v.to_dict() for v in self.verdicts]
        }


@dataclass(frozen=True)
class ResultSet:
    """Finalized results of a run, one entry per distinct input name.

    ``complete`` is False when the run was aborted before every probe
    finished; the entries then hold only what had been gathered.
    """
    results: Tuple[NameResult, ...] = ()
    tlds: Tuple[str, ...] = ()
    complete: bool = True

    def __iter__(self) -> Iterator[NameResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def names(self) -> List[str]:
        return [r.name for r in self.results]

    def get(self, name: str) -> Optional[NameResult]:
        for result in self.results:
            if result.name == name:
                return result
        return None

    def count_verdicts(self) -> int:
        return sum(len(r.verdicts) for r in self.results)

    def to_list(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.results]
