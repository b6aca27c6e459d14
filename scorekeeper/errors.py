class ScorekeeperError(Exception):
    """Base class for scorekeeper model errors."""


class StrokeOutOfRange(ScorekeeperError, ValueError):
    def __init__(self, value, low, high):
        super().__init__(f"stroke count {value!r} outside {low}-{high}")
        self.value = value


class TooManyPlayers(ScorekeeperError, ValueError):
    def __init__(self, count, limit):
        super().__init__(f"{count} players selected, at most {limit} allowed")
        self.count = count
