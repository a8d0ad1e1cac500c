import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterable


@dataclass
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class DoctorLocks:
    """
    One lock per doctor id so the validate -> commit sequence for a doctor runs alone,
    while proposals for different doctors proceed in parallel.

    Entries only live while some caller holds or waits for them, so ids that never reach
    the roster do not accumulate.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._entries: Dict[str, _Entry] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def _checkout(self, doctor_ids):
        with self._guard:
            entries = []
            for doctor_id in doctor_ids:
                entry = self._entries.setdefault(doctor_id, _Entry())
                entry.users += 1
                entries.append(entry)
            return entries

    def _checkin(self, doctor_ids):
        with self._guard:
            for doctor_id in doctor_ids:
                entry = self._entries[doctor_id]
                entry.users -= 1
                if entry.users == 0:
                    del self._entries[doctor_id]

    @contextmanager
    def hold(self, doctor_ids: Iterable[str]):
        """Hold the locks of all given doctors, acquired in sorted id order."""
        ordered = sorted(set(doctor_ids))
        entries = self._checkout(ordered)
        acquired = []
        try:
            for entry in entries:
                entry.lock.acquire()
                acquired.append(entry)
            yield
        finally:
            for entry in reversed(acquired):
                entry.lock.release()
            self._checkin(ordered)
