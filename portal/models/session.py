"""
Session Model
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionRecord:
    """A logged-in user and the moment the session stops being valid"""
    username: str
    expiry: datetime

    def __repr__(self):
        return f'<SessionRecord {self.username} until {self.expiry:%Y-%m-%d %H:%M:%S}>'
