from dataclasses import asdict, dataclass
from typing import Any
from uuid import uuid4


@dataclass
class Todo:
    """Todo aggregate root. ``id`` is assigned once, at creation."""

    id: str
    name: str
    description: str
    status: bool = False

    @classmethod
    def create(cls, name: str, description: str) -> "Todo":
        """Factory method to create a new, not yet completed todo."""
        return cls(
            id=str(uuid4()),
            name=name,
            description=description,
            status=False,
        )

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Todo":
        """Build a todo from a DynamoDB item, ignoring unknown attributes."""
        return cls(
            id=str(item["id"]),
            name=item.get("name", ""),
            description=item.get("description", ""),
            status=bool(item.get("status", False)),
        )

    def to_item(self) -> dict[str, Any]:
        """Serialize to the DynamoDB item shape."""
        return asdict(self)
