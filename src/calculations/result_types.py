"""
Standardized result types for polygon calculations
Ensures consistent return patterns between the calculator and the UI
"""

from typing import Optional, Tuple, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .geometry import Edge, calculate_perimeter


ERROR_LABEL = "Error: "


class ResultStatus(Enum):
    """Enumeration of possible result statuses"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_FAILED = "validation_failed"


@dataclass(frozen=True)
class EdgeCalculationResult:
    """
    Immutable outcome of one compute pass

    A new instance replaces the previous one on every calculation; a failed
    result never carries edges.
    """
    status: ResultStatus
    edges: Tuple[Edge, ...] = ()
    error_message: Optional[str] = None
    perimeter: float = 0.0
    metadata: dict = field(default_factory=dict, compare=False)

    @property
    def is_success(self) -> bool:
        """Check if the operation was successful"""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the operation failed for any reason"""
        return self.status != ResultStatus.SUCCESS

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @classmethod
    def success(cls, edges: Sequence[Edge], metadata: dict = None) -> 'EdgeCalculationResult':
        """Create a successful result"""
        edges = tuple(edges)
        return cls(
            status=ResultStatus.SUCCESS,
            edges=edges,
            perimeter=calculate_perimeter(edges),
            metadata=metadata or {}
        )

    @classmethod
    def failure(cls, error_message: str, status: ResultStatus = ResultStatus.ERROR,
                metadata: dict = None) -> 'EdgeCalculationResult':
        """Create a failed result, prefixing the message with the error label"""
        return cls(
            status=status,
            error_message=f"{ERROR_LABEL}{error_message}",
            metadata=metadata or {}
        )

    @classmethod
    def empty(cls) -> 'EdgeCalculationResult':
        """Result shown before the first calculation"""
        return cls(status=ResultStatus.SUCCESS)
