from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Span:
    """Half-open character range ``[start, end)`` within a string."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Span start ({self.start}) must be <= end ({self.end})"
            )

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        """Human-friendly string showing range and width."""
        return f"Span({self.start}→{self.end}, {self.end - self.start} chars)"
