"""Configuration for a single enumeration run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from .types import InvalidConfiguration, Mode
from .enumeration.limited import TypedLimitedCombination, total_number_of_atoms


@dataclass
class EnumerationConfig:
    """Configuration for combination enumeration.

    Attributes:
        counts: Availability map (atom name -> copies).
        size: Requested combination size (default: total number of atoms).
        mode: Size interpretation; strings such as "max" are accepted.
        limit: Maximum number of combinations to emit (None = all).
        output: CSV or JSON file to write; printed to stdout if None.
    """
    counts: Dict[str, int] = field(default_factory=dict)
    size: Optional[int] = None
    mode: Union[Mode, str] = Mode.EXACT
    limit: Optional[int] = None
    output: Optional[Path] = None

    def __post_init__(self):
        self.mode = Mode.coerce(self.mode)
        if self.size is None:
            self.size = total_number_of_atoms(self.counts)
        if self.limit is not None and self.limit < 0:
            raise InvalidConfiguration(f"limit must not be negative, got {self.limit}")
        if self.output is not None:
            self.output = Path(self.output)

    def build(self) -> TypedLimitedCombination:
        """Construct the generator described by this configuration."""
        return TypedLimitedCombination(self.counts, self.size, self.mode)
