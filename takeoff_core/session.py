# takeoff_core/session.py

"""
Session state for one user of the speed finder.

SessionState is an immutable value; every user action is a pure function
returning a new state. SessionController wires those transitions to a
debounced search for UIs that keep a live object per user.
"""

import threading
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .aircraft_loader import AircraftRecord, dprint, parse_number
from .calculations import estimate_speed, extended_wing_speed
from .constants import DEFAULT_ANGLE_OF_ATTACK, SEARCH_DEBOUNCE_MS
from .geometry import effective_wing_area, parse_override
from .search import suggest


@dataclass(frozen=True)
class SpeedResults:
    effective_wing_area: Optional[float]
    normal: Optional[int]
    extended: Optional[int]


@dataclass(frozen=True)
class SessionState:
    query: str = ""
    override_wing_area: Optional[float] = None
    angle_of_attack: float = DEFAULT_ANGLE_OF_ATTACK
    suggestions: Tuple[AircraftRecord, ...] = ()
    selection: Optional[AircraftRecord] = None
    # Generation of the latest scheduled search; older results are dropped
    search_seq: int = 0

    def to_dict(self):
        """JSON-safe form for a dcc.Store. Records are stored by table row."""
        return {
            "query": self.query,
            "override_wing_area": self.override_wing_area,
            "angle_of_attack": self.angle_of_attack,
            "suggestions": [rec.row for rec in self.suggestions],
            "selection": self.selection.row if self.selection is not None else None,
            "search_seq": self.search_seq,
        }

    @classmethod
    def from_dict(cls, data, table):
        if not data:
            return cls()
        suggestions = tuple(
            rec for rec in (table.by_row(row) for row in data.get("suggestions") or [])
            if rec is not None
        )
        angle = data.get("angle_of_attack", DEFAULT_ANGLE_OF_ATTACK)
        return cls(
            query=data.get("query") or "",
            override_wing_area=parse_override(data.get("override_wing_area")),
            angle_of_attack=angle if angle is not None else 0,
            suggestions=suggestions,
            selection=table.by_row(data.get("selection")),
            search_seq=data.get("search_seq") or 0,
        )


# =============================================================================
# TRANSITIONS
# =============================================================================

def set_query(state, text):
    """New query text. Schedules a search (via the seq bump); selection is kept."""
    return replace(state, query=text or "", search_seq=state.search_seq + 1)


def apply_suggestions(state, seq, results):
    """Apply search results, unless a newer search has been scheduled since."""
    if seq != state.search_seq:
        dprint(f"[SEARCH] dropped stale results (seq {seq}, current {state.search_seq})")
        return state
    return replace(state, suggestions=tuple(results))


def run_search(state, table):
    """Search for the current query and apply the results immediately."""
    return apply_suggestions(state, state.search_seq, suggest(state.query, table))


def select_suggestion(state, record):
    """
    Pick a suggested aircraft.

    The query becomes its model name, suggestions are cleared, any pending
    search is invalidated, and the wing-area override is pre-filled from the
    record (base span preferred) so the user can still edit it.
    """
    return replace(
        state,
        selection=record,
        query=record.model_name if record is not None else "",
        suggestions=(),
        override_wing_area=effective_wing_area(None, record),
        search_seq=state.search_seq + 1,
    )


def set_override_wing_area(state, value):
    """Set the override from a number or raw form text; empty clears it."""
    return replace(state, override_wing_area=parse_override(value))


def set_angle(state, value):
    """Set angle of attack. Non-numeric input becomes 0 (not computable)."""
    angle = parse_number(value)
    return replace(state, angle_of_attack=angle if angle is not None else 0)


def compute_results(state):
    area = effective_wing_area(state.override_wing_area, state.selection)
    normal = estimate_speed(area, state.angle_of_attack) if area is not None else None
    extended = extended_wing_speed(state.selection, area, state.angle_of_attack)
    return SpeedResults(effective_wing_area=area, normal=normal, extended=extended)


# =============================================================================
# DEBOUNCE
# =============================================================================

class TimerScheduler:
    """Runs callbacks on daemon threading.Timer threads."""

    def schedule(self, delay_s, fn):
        timer = threading.Timer(delay_s, fn)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer:
    """
    Supersede, don't queue.

    Each call() cancels whatever is pending and schedules a fresh call, so at
    most one callback is pending and only the latest one ever runs. The
    scheduler must return a handle with cancel(); UI toolkits can pass their
    own (e.g. wrapping tkinter's after/after_cancel). Callbacks may arrive on
    another thread, so bookkeeping is guarded by a lock.
    """

    def __init__(self, delay_ms=SEARCH_DEBOUNCE_MS, scheduler=None):
        self.delay_ms = delay_ms
        self._scheduler = scheduler or TimerScheduler()
        self._pending = None
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def pending(self):
        return self._pending is not None

    def call(self, fn, *args, **kwargs):
        with self._lock:
            self.cancel()
            generation = self._generation

            def fire():
                # A handle that couldn't be cancelled in time still must not run
                with self._lock:
                    if generation != self._generation:
                        return
                    self._pending = None
                fn(*args, **kwargs)

            self._pending = self._scheduler.schedule(self.delay_ms / 1000.0, fire)

    def cancel(self):
        with self._lock:
            self._generation += 1
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None


class SessionController:
    """
    Owns one SessionState and its debounced search.

    Intended for a single user driving events serially (desktop UI, REPL,
    tests). The Dash app keeps SessionState in a dcc.Store instead.
    The default scheduler applies searches from a timer thread, so every
    read-modify-write of ``state`` holds the controller lock.
    """

    def __init__(self, table, delay_ms=SEARCH_DEBOUNCE_MS, scheduler=None, state=None):
        self.table = table
        self.state = state or SessionState()
        self._debouncer = Debouncer(delay_ms, scheduler)
        self._lock = threading.Lock()

    @property
    def search_pending(self):
        return self._debouncer.pending

    def set_query(self, text):
        with self._lock:
            self.state = set_query(self.state, text)
            self._debouncer.call(self._search, self.state.search_seq, self.state.query)

    def _search(self, seq, query):
        results = suggest(query, self.table)
        dprint(f"[SEARCH] {query!r} -> {len(results)} matches")
        with self._lock:
            self.state = apply_suggestions(self.state, seq, results)

    def select_suggestion(self, record):
        with self._lock:
            self._debouncer.cancel()
            self.state = select_suggestion(self.state, record)

    def set_override_wing_area(self, value):
        with self._lock:
            self.state = set_override_wing_area(self.state, value)

    def set_angle(self, value):
        with self._lock:
            self.state = set_angle(self.state, value)

    def results(self):
        with self._lock:
            state = self.state
        return compute_results(state)

    def close(self):
        """Drop any pending search."""
        self._debouncer.cancel()
