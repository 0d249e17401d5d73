"""
Transaction log module.
"""

from typing import Iterator, List

from trading_sim.trading_types import TradeRecord


class TransactionLog:
    """Append-only record of executed trades in execution order."""

    def __init__(self):
        self._records: List[TradeRecord] = []

    def append(self, record: TradeRecord) -> None:
        self._records.append(record)

    def recent(self, n: int = 10) -> List[TradeRecord]:
        """Last n records, oldest first."""
        if n <= 0:
            return []
        return self._records[-n:]

    def for_user(self, username: str) -> List[TradeRecord]:
        return [record for record in self._records if record.username == username]

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
