"""Journal history models"""
from pydantic import BaseModel


class JournalEntry(BaseModel):
    """One saved thought. `date` is display-formatted, not ISO"""
    date: str
    text: str
