"""Configuration classes for graphsearch components."""

from dataclasses import dataclass
from typing import List, Sequence


@dataclass
class PathDisplayConfig:
    """Controls how ``str(Path)`` abbreviates long vertex sequences."""

    # Number of vertices shown at each end of a long path
    display_cut: int = 10

    # Placed between displayed vertices
    separator: str = ", "

    # Stands in for the elided middle section
    ellipsis: str = "..."

    def __post_init__(self) -> None:
        if self.display_cut < 1:
            raise ValueError(
                f"display_cut must be a positive integer, got {self.display_cut}"
            )

    def display_items(self, items: Sequence[object]) -> List[str]:
        """Return the display strings for ``items``, eliding the middle.

        The first and last ``display_cut`` items are kept. When more than
        ``2 * display_cut`` items are present the rest collapse into a single
        ``ellipsis`` entry.
        """
        tail_cut = len(items) - 1 - self.display_cut
        shown: List[str] = []
        for index, item in enumerate(items):
            if index < self.display_cut or index > tail_cut:
                shown.append(str(item))
            elif index == self.display_cut:
                shown.append(self.ellipsis)
        return shown

    def format_sequence(self, items: Sequence[object]) -> str:
        return self.separator.join(self.display_items(items))


# Global configuration instance
DISPLAY_CONFIG = PathDisplayConfig()
