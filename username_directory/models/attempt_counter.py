"""
Per-username availability check counter
"""
import threading
from typing import Dict, Optional

from .report import MostAttemptedReport


class AttemptCounter:
    """
    Mapping of username -> number of availability checks.
    
    Counts only increase. An entry is created on the first increment.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}
    
    def increment(self, username: str) -> int:
        """Atomically add one attempt and return the new count"""
        with self._lock:
            count = self._counts.get(username, 0) + 1
            self._counts[username] = count
            return count
    
    def get(self, username: str) -> int:
        with self._lock:
            return self._counts.get(username, 0)
    
    def snapshot(self) -> Dict[str, int]:
        """
        Copy of all counts.
        
        Increments racing with the copy may or may not be reflected; callers
        must treat the result as analytics, not as a linearizable read.
        """
        with self._lock:
            return dict(self._counts)
    
    def most_attempted(self) -> Optional[MostAttemptedReport]:
        """
        Username with the strictly highest count, or None if nothing was counted.
        
        Usernames are scanned in sorted order, so on a tie the
        lexicographically smallest username wins.
        """
        best_username = None
        best_count = 0
        
        counts = self.snapshot()
        for username in sorted(counts):
            if counts[username] > best_count:
                best_username = username
                best_count = counts[username]
        
        if best_username is None:
            return None
        
        return MostAttemptedReport(username=best_username, count=best_count)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
