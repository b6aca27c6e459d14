"""
Round lifecycle.

``RoundState`` owns the course and player catalogs, the current selection and
the active ``Round``. A new ``Round`` value is built every time a round starts;
the previous one is discarded along with its scorecards.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from scorekeeper.course import HOLE_COUNT, Course, Player
from scorekeeper.errors import TooManyPlayers
from scorekeeper.scoring import ScoreEntry, validate_stroke

logger = logging.getLogger(__name__)

MAX_PLAYERS = 4
FIRST_HOLE = 1
LAST_HOLE = HOLE_COUNT


class Phase(enum.Enum):
    NO_COURSE_SELECTED = "no_course_selected"
    PLAYERS_SELECTED = "players_selected"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_COMPLETE = "round_complete"


class NotSelected:
    def __repr__(self):
        return "NOT_SELECTED"


NOT_SELECTED = NotSelected()


@dataclass(frozen=True)
class Selected:
    course: Course


@dataclass
class Round:
    course: Course
    entries: List[ScoreEntry] = field(default_factory=list)
    current_hole: int = FIRST_HOLE
    complete: bool = False

    @classmethod
    def begin(cls, course, players):
        return cls(course=course, entries=[ScoreEntry.seeded(p, course) for p in players])

    @property
    def current_par(self):
        return self.course.par_for(self.current_hole)

    def running_relative(self, entry):
        return entry.relative_to_par(self.course, self.current_hole)

    def final_relative(self, entry):
        return entry.relative_to_par(self.course, HOLE_COUNT)

    def leaderboard(self):
        """Entries ordered by total strokes, ties kept in player order."""
        return sorted(self.entries, key=lambda e: e.total)


class RoundState:
    def __init__(self):
        self.courses: List[Course] = []
        self.players: List[Player] = []
        self.selection = NOT_SELECTED
        self.selected_players: List[Player] = []
        self.round: Optional[Round] = None

    # Catalogs

    def add_course(self, course):
        self.courses.append(course)
        logger.info("Added course %r (par %d)", course.name, course.total_par)
        return course

    def add_player(self, player):
        self.players.append(player)
        logger.info("Added player %r", player.name)
        return player

    def find_course(self, course_id):
        return next((c for c in self.courses if c.id == course_id), None)

    def find_player(self, player_id):
        return next((p for p in self.players if p.id == player_id), None)

    # Read-through views

    @property
    def selected_course(self):
        if isinstance(self.selection, Selected):
            return self.selection.course
        return None

    @property
    def scores(self):
        if self.round is None:
            return []
        return self.round.entries

    @property
    def current_hole(self):
        if self.round is None:
            return FIRST_HOLE
        return self.round.current_hole

    @property
    def phase(self):
        if self.round is not None:
            if self.round.complete:
                return Phase.ROUND_COMPLETE
            return Phase.ROUND_IN_PROGRESS
        if isinstance(self.selection, Selected):
            return Phase.PLAYERS_SELECTED
        return Phase.NO_COURSE_SELECTED

    @property
    def in_progress(self):
        return self.phase is Phase.ROUND_IN_PROGRESS

    # Lifecycle

    def select_course(self, course):
        self.selection = Selected(course)

    def select_players(self, players):
        players = list(players)
        if len(players) > MAX_PLAYERS:
            raise TooManyPlayers(len(players), MAX_PLAYERS)
        self.selected_players = players

    def start_round(self):
        if not isinstance(self.selection, Selected):
            logger.info("start_round ignored: no course selected")
            return None
        course = self.selection.course
        self.round = Round.begin(course, self.selected_players)
        logger.info(
            "Started round on %r with %d player(s)", course.name, len(self.round.entries)
        )
        return self.round

    def advance_hole(self):
        if not self.in_progress:
            return self.current_hole
        if self.round.current_hole >= LAST_HOLE:
            self.round.complete = True
            logger.info("Round on %r complete", self.round.course.name)
        else:
            self.round.current_hole += 1
        return self.round.current_hole

    def retreat_hole(self):
        if not self.in_progress:
            return self.current_hole
        self.round.current_hole = max(FIRST_HOLE, self.round.current_hole - 1)
        return self.round.current_hole

    def finish_round(self):
        if not self.in_progress:
            return
        self.round.complete = True
        logger.info(
            "Round on %r finished at hole %d", self.round.course.name, self.round.current_hole
        )

    def record_stroke(self, entry_index, value):
        if not self.in_progress:
            logger.debug("record_stroke ignored: no round in progress")
            return
        validate_stroke(value)
        if not 0 <= entry_index < len(self.round.entries):
            raise IndexError(f"no scorecard at index {entry_index}")
        entry = self.round.entries[entry_index]
        entry.scores[self.round.current_hole - 1] = value
