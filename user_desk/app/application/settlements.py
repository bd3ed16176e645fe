from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from user_desk.app.domain.models.user_record import RecordId


@dataclass
class SettlementLedger:
    """Tags outgoing calls with a sequence number and remembers the newest per record."""

    latest_by_record: dict[RecordId, int] = field(default_factory=dict)
    _counter: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)

    def issue(self, record_id: RecordId | None) -> int:
        sequence = next(self._counter)
        if record_id is not None:
            self.latest_by_record[record_id] = sequence
        return sequence

    def settle(self, record_id: RecordId | None, sequence: int) -> bool:
        """Mark a call settled; False when a newer call for the same record was issued after it."""
        if record_id is None:
            return True
        return self.latest_by_record.get(record_id, sequence) <= sequence
