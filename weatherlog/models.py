from typing import Dict, List, Literal, Optional
from pydantic import BaseModel

# --- Record ---

# Encoding order matters: records are written as day=..|condition=..|high=..|low=..
FIELDS = ("day", "condition", "high", "low")

Record = Dict[str, str]

SEPARATOR = "|"

# --- Allowed Actions ---

AllowedAction = Literal["init", "add", "list", "summary"]

# --- Command Schema ---

class Command(BaseModel):
    action: AllowedAction
    items: List[str] = []

# --- Summary ---

class Summary(BaseModel):
    count: int
    field: Optional[str] = None
    total: Optional[int] = None

    def line(self) -> str:
        if self.field is None:
            return f"count={self.count}"
        return f"count={self.count}, {self.field}_total={self.total or 0}"
