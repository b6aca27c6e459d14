"""Per-player scorecards and the relative-to-par arithmetic."""

import uuid
from dataclasses import dataclass, field
from typing import List

from scorekeeper.course import HOLE_COUNT, Course, Player
from scorekeeper.errors import StrokeOutOfRange

MIN_STROKES = 1
MAX_STROKES = 10


def validate_stroke(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise StrokeOutOfRange(value, MIN_STROKES, MAX_STROKES)
    if not MIN_STROKES <= value <= MAX_STROKES:
        raise StrokeOutOfRange(value, MIN_STROKES, MAX_STROKES)
    return value


def clamp_stroke(value):
    """Pull a form value into the enterable stroke range."""
    return max(MIN_STROKES, min(value, MAX_STROKES))


@dataclass
class ScoreEntry:
    player: Player
    scores: List[int]
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def seeded(cls, player, course):
        # Every slot starts at the first hole's par, not each hole's own par.
        # Likely a defect: per-hole seeding was probably intended.
        return cls(player=player, scores=[course.pars[0]] * HOLE_COUNT)

    @property
    def total(self):
        return sum(self.scores)

    def relative_to_par(self, course: Course, upto_hole: int) -> int:
        """Strokes minus par over the first ``upto_hole`` holes."""
        return sum(self.scores[:upto_hole]) - sum(course.pars[:upto_hole])


def total(entry):
    return entry.total


def relative_to_par(entry, course, upto_hole):
    return entry.relative_to_par(course, upto_hole)


def format_relative(to_par):
    if to_par > 0:
        return f"+{to_par}"
    if to_par < 0:
        return str(to_par)
    return "E"
