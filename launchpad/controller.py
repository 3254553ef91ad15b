"""Phase Controller — owns the project state and drives the four-phase wizard.

All mutation funnels through ``update``, which persists the full state after
every change. Gateway calls run one at a time under a busy flag; a trigger
that arrives while a call is in flight is dropped.
"""

import copy
import sys

from launchpad.agents.content import generate_demo_script
from launchpad.agents.demand import analyze_demand, extract_comment_metrics
from launchpad.agents.ideation import analyze_idea, generate_ideas
from launchpad.agents.mvp import generate_mvp_plan
from launchpad.state import PHASES, Phase, ProjectState
from launchpad.store import StateStore
from launchpad.utils.validator import parse_count


def infer_phase(state: ProjectState) -> Phase:
    """Reconstruct the phase the user was on from the persisted fields.

    Priority order (first match wins):
    1. mvp_specs set → mvp
    2. is_go → demand
    3. video_script set → content
    4. otherwise (d3_analysis set or not) → idea
    """
    if state.get("mvp_specs"):
        return "mvp"
    if state.get("is_go"):
        return "demand"
    if state.get("video_script"):
        return "content"
    return "idea"


def can_advance(phase: Phase, state: ProjectState) -> bool:
    """Return True if the forward transition out of ``phase`` is allowed."""
    if phase == "idea":
        return state.get("d3_analysis") is not None
    if phase == "content":
        return state.get("video_script") is not None
    if phase == "demand":
        return bool(state.get("is_go"))
    return False


class PhaseController:
    """Explicit state container for one wizard session."""

    def __init__(self, store: StateStore | None = None):
        self.store = store or StateStore()
        self._state = self.store.load()
        self.phase: Phase = infer_phase(self._state)
        self.busy = False

    # --- State container ---

    @property
    def state(self) -> ProjectState:
        """A copy of the current state. Mutate through update() instead."""
        return copy.deepcopy(self._state)

    def update(self, **fields) -> ProjectState:
        """Merge fields into the state and persist the whole record."""
        unknown = set(fields) - set(self._state)
        if unknown:
            raise KeyError(f"Unknown project fields: {sorted(unknown)}")
        self._state = {**self._state, **copy.deepcopy(fields)}
        self.store.save(self._state)
        return self.state

    def set_demand_data(self, comments=None, wants=None, feedback: str | None = None) -> ProjectState:
        """Manual metrics entry. Counts are coerced like a number field; unset values are kept."""
        demand = dict(self._state["demand_data"])
        if comments is not None:
            demand["comments"] = parse_count(comments)
        if wants is not None:
            demand["wants"] = parse_count(wants)
        if feedback is not None:
            demand["feedback"] = feedback
        return self.update(demand_data=demand)

    def reset(self) -> ProjectState:
        """Drop the stored project and start over from the defaults."""
        self.store.clear()
        self._state = self.store.load()
        self.phase = infer_phase(self._state)
        return self.state

    # --- Transitions ---

    def can_advance(self) -> bool:
        return can_advance(self.phase, self._state)

    def advance(self) -> Phase:
        """Move to the next phase if its gate is open; otherwise stay put."""
        if self.can_advance():
            self.phase = PHASES[PHASES.index(self.phase) + 1]
        return self.phase

    def abandon(self) -> Phase:
        """From demand only: discard the verdict and return to idea.

        idea, niche and every other field are left as they are.
        """
        if self.phase != "demand":
            return self.phase
        self.update(is_go=False, demand_analysis=None)
        self.phase = "idea"
        return self.phase

    # --- Action guards ---

    def can_analyze_idea(self) -> bool:
        return not self.busy and bool(self._state["idea"]) and bool(self._state["niche"])

    def can_extract_metrics(self, raw_text: str) -> bool:
        return not self.busy and bool(raw_text)

    def can_analyze_demand(self) -> bool:
        return not self.busy and self._state["demand_data"]["comments"] != 0

    def can_generate_mvp_plan(self) -> bool:
        return not self.busy and bool(self._state["demand_analysis"])

    # --- Actions ---

    def _dispatch(self, name: str, call):
        """Run one gateway call under the busy flag. Returns None if already busy."""
        if self.busy:
            print(f"[Launchpad] Ignoring '{name}': another request is in flight.", file=sys.stderr)
            return None
        self.busy = True
        try:
            return call()
        finally:
            self.busy = False

    def generate_ideas(self) -> str | None:
        """Replace the idea text with AI suggestions for the current niche."""
        ideas = self._dispatch("generate_ideas", lambda: generate_ideas(self._state["niche"]))
        if ideas is not None:
            self.update(idea=ideas)
        return ideas

    def analyze_idea(self) -> str | None:
        if not self.can_analyze_idea():
            return None
        analysis = self._dispatch(
            "analyze_idea",
            lambda: analyze_idea(self._state["idea"], self._state["niche"]),
        )
        if analysis is not None:
            self.update(d3_analysis=analysis)
        return analysis

    def generate_script(self) -> str | None:
        script = self._dispatch("generate_script", lambda: generate_demo_script(self._state["idea"]))
        if script is not None:
            self.update(video_script=script)
        return script

    def extract_metrics(self, raw_text: str):
        """Fill demand_data from a pasted comment dump."""
        if not self.can_extract_metrics(raw_text):
            return None
        metrics = self._dispatch("extract_metrics", lambda: extract_comment_metrics(raw_text))
        if metrics is not None:
            self.update(demand_data=metrics)
        return metrics

    def analyze_demand(self):
        if not self.can_analyze_demand():
            return None
        demand = self._state["demand_data"]
        verdict = self._dispatch(
            "analyze_demand",
            lambda: analyze_demand(demand["comments"], demand["wants"], demand["feedback"]),
        )
        if verdict is not None:
            self.update(demand_analysis=verdict["analysis"], is_go=verdict["is_go"])
        return verdict

    def generate_mvp_plan(self) -> str | None:
        if not self.can_generate_mvp_plan():
            return None
        specs = self._dispatch(
            "generate_mvp_plan",
            lambda: generate_mvp_plan(self._state["idea"], self._state["demand_analysis"]),
        )
        if specs is not None:
            self.update(mvp_specs=specs)
        return specs
