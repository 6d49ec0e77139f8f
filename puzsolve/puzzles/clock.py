from puzsolve.core.configuration import Configuration, config_dataclass


@config_dataclass
class ClockConfig(Configuration):
    """
    Move a clock hand from ``hour`` to ``end`` one hour at a time.

    Hours run from 1 to ``hours`` and wrap around in both directions.
    """

    hours: int
    hour: int
    end: int

    def __post_init__(self):
        if self.hours < 1:
            raise ValueError(f"A clock needs at least one hour, got {self.hours}")
        for name in ("hour", "end"):
            value = getattr(self, name)
            if not 1 <= value <= self.hours:
                raise ValueError(f"{name} must be within 1..{self.hours}, got {value}")

    def is_goal(self) -> bool:
        return self.hour == self.end

    def successors(self) -> tuple["ClockConfig", ...]:
        """Backward one hour, then forward one hour."""
        backward = self.hour - 1 if self.hour > 1 else self.hours
        forward = self.hour + 1 if self.hour < self.hours else 1
        return (
            ClockConfig(self.hours, backward, self.end),
            ClockConfig(self.hours, forward, self.end),
        )

    def __str__(self) -> str:
        return str(self.hour)
