"""Thread-safe accumulation of per-pair verdicts into a ResultSet."""

import threading
from typing import Dict, Iterable, List, Optional

from ..exceptions import AggregatorFinalizedError
from ..models import NameResult, ResultSet, TLDVerdict


def non_blank(names: Iterable[str]) -> List[str]:
    """Drop empty and whitespace-only names, keeping order and duplicates."""
    return [name for name in names if name and name.strip()]


class ResultAggregator:
    """Collects verdicts for a fixed set of names.

    Every distinct non-blank name gets an entry as soon as the aggregator is
    created, so a name whose probes all failed still shows up in the final
    ResultSet with no verdicts.
    """

    def __init__(self, names: Iterable[str], tlds: Iterable[str]):
        self.tlds = tuple(tlds)
        self._tld_order: Dict[str, int] = {}
        for i, tld in enumerate(self.tlds):
            self._tld_order.setdefault(tld, i)

        self._verdicts: Dict[str, List[TLDVerdict]] = {}
        for name in non_blank(names):
            self._verdicts.setdefault(name, [])

        self._lock = threading.Lock()
        self._received = 0
        self._final: Optional[ResultSet] = None

    @property
    def finalized(self) -> bool:
        return self._final is not None

    def accumulate(self, name: str, verdict: Optional[TLDVerdict]):
        """Record the outcome of one probe; ``None`` means no verdict."""
        with self._lock:
            if self._final is not None:
                raise AggregatorFinalizedError(
                    f"verdict for {name!r} arrived after finalization"
                )
            if name not in self._verdicts:
                raise KeyError(name)
            self._received += 1
            if verdict is not None:
                self._verdicts[name].append(verdict)

    def finalize(self, complete: bool = True) -> ResultSet:
        """Freeze the accumulated verdicts.

        Verdicts are ordered by the position of their TLD in the input list,
        so the result does not depend on completion order. Later calls
        return the same ResultSet.
        """
        with self._lock:
            if self._final is None:
                order = self._tld_order
                results = tuple(
                    NameResult(
                        name=name,
                        verdicts=tuple(sorted(
                            verdicts, key=lambda v: order.get(v.tld, len(order))
                        ))
                    )
                    for name, verdicts in self._verdicts.items()
                )
                self._final = ResultSet(
                    results=results,
                    tlds=tuple(order),
                    complete=complete
                )
            return self._final

    def stats(self) -> Dict[str, int]:
        """Counts of names, delivered probes and recorded verdicts."""
        with self._lock:
            verdicts = sum(len(v) for v in self._verdicts.values())
            return {
                'names': len(self._verdicts),
                'received': self._received,
                'verdicts': verdicts,
                'without_verdict': self._received - verdicts
            }
