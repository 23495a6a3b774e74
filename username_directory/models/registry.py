"""
Registry of taken usernames
"""
import threading
from typing import Dict, Optional


class Registry:
    """
    Authoritative mapping of username -> user id.
    
    Entries are only ever added, never overwritten or removed. The lock
    guards a single insert-if-absent or lookup and is never held across calls.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._owners: Dict[str, str] = {}
    
    def insert_if_absent(self, username: str, user_id: str) -> bool:
        """
        Atomically map username to user_id unless the username is taken
        
        Returns:
            True if the mapping was created, False if the username already
            had an owner (the existing mapping is left unchanged)
        """
        with self._lock:
            if username in self._owners:
                return False
            self._owners[username] = user_id
            return True
    
    def contains(self, username: str) -> bool:
        with self._lock:
            return username in self._owners
    
    def get(self, username: str) -> Optional[str]:
        with self._lock:
            return self._owners.get(username)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._owners)
