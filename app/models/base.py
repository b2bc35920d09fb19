"""
Base record type for everything kept in the entity store
"""
from datetime import datetime
from pydantic import BaseModel


class Record(BaseModel):
    """Stored row: store-assigned id plus creation timestamp"""

    id: int
    created_at: datetime
