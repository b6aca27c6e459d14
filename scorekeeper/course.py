"""
Course and player records.
"""

import uuid
from dataclasses import dataclass, field
from typing import Tuple

HOLE_COUNT = 18
DEFAULT_HOLE_PAR = 4

# Bundled course, seeded into the catalog when SEED_DEFAULT_COURSE is set
DEFAULT_COURSE_NAME = "Arrowhead Golf Course"

# Par for each hole (1-18)
DEFAULT_COURSE_PARS = (5, 4, 4, 3, 5, 4, 4, 3, 4, 4, 3, 4, 5, 4, 3, 4, 4, 5)


def _new_id():
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Course:
    name: str
    pars: Tuple[int, ...]
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        pars = tuple(self.pars)
        if len(pars) != HOLE_COUNT:
            raise ValueError(f"a course needs {HOLE_COUNT} pars, got {len(pars)}")
        if any(isinstance(p, bool) or not isinstance(p, int) or p < 1 for p in pars):
            raise ValueError(f"pars must be positive integers: {pars!r}")
        object.__setattr__(self, "pars", pars)

    @property
    def total_par(self):
        return sum(self.pars)

    def par_for(self, hole):
        """Get par for a specific hole (1-18)"""
        return self.pars[hole - 1]


@dataclass(frozen=True)
class Player:
    name: str
    id: str = field(default_factory=_new_id)


def blank_pars():
    """Starting pars for the course editor."""
    return (DEFAULT_HOLE_PAR,) * HOLE_COUNT


def default_course():
    return Course(name=DEFAULT_COURSE_NAME, pars=DEFAULT_COURSE_PARS)
