"""Per-run settings and counters passed explicitly through parse calls."""

from dataclasses import dataclass, field


@dataclass
class RunContext:
    """Verbosity and counters for one documentation run."""
    verbosity: int = 0
    counters: dict[str, int] = field(default_factory=dict)

    def count(self, key: str, amount: int = 1):
        self.counters[key] = self.counters.get(key, 0) + amount

    def get(self, key: str) -> int:
        return self.counters.get(key, 0)
