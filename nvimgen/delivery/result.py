# nvimgen Delivery Result
# Outcome of a single delivery attempt

from dataclasses import dataclass
from typing import Optional


@dataclass
class DeliveryResult:
    """Result of moving generated text to one destination."""

    target: str
    message: str = ""
    error: Optional[str] = None
    path: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if the delivery succeeded."""
        return self.error is None

    @classmethod
    def failed(cls, target: str, error: str) -> "DeliveryResult":
        return cls(target=target, error=error)
