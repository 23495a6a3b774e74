"""
Attempt analytics report
"""
from dataclasses import dataclass
from typing import Any, Dict

from ..constants import ReportConstants


@dataclass(frozen=True)
class MostAttemptedReport:
    """The most frequently checked username and its check count"""
    
    username: str
    count: int
    
    def format(self) -> str:
        """Render as '<username> (<count> attempts)'"""
        return ReportConstants.MOST_ATTEMPTED_FORMAT.format(
            username=self.username,
            count=self.count
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'username': self.username,
            'count': self.count
        }
    
    def __str__(self) -> str:
        return self.format()
