"""
HTTP request/response models for the netlog API.
"""

from pydantic import BaseModel
from typing import Dict, List, Optional


class LogListResponse(BaseModel):
    """
    Current contents of the store.

    logs:
      payload dicts (see LogEntry.to_payload), newest first
    """
    count: int
    logs: List[Dict[str, Optional[str]]]
