"""Project state — the single persisted record behind the wizard."""

import copy
from typing import Literal, TypedDict

Phase = Literal["idea", "content", "demand", "mvp"]

# Strict linear order of the wizard.
PHASES: tuple[Phase, ...] = ("idea", "content", "demand", "mvp")


class DemandData(TypedDict):
    comments: int  # Total comment count, manual or AI-estimated.
    wants: int  # High-intent comments ("take my money"). Not checked against comments.
    feedback: str  # Qualitative summary of the comments.


class ProjectState(TypedDict):
    idea: str
    niche: str
    d3_analysis: str | None  # Last D3 critique of the idea.
    video_script: str | None  # Last fake-demo script.
    demand_data: DemandData
    demand_analysis: str | None  # Last demand verdict narrative.
    is_go: bool  # Demand gate result, derived from demand_analysis.
    mvp_specs: str | None  # Last MVP plan with embedded prototype code.


INITIAL_STATE: ProjectState = {
    "idea": "",
    "niche": "",
    "d3_analysis": None,
    "video_script": None,
    "demand_data": {
        "comments": 0,
        "wants": 0,
        "feedback": "",
    },
    "demand_analysis": None,
    "is_go": False,
    "mvp_specs": None,
}


def initial_state() -> ProjectState:
    """Return a fresh all-default ProjectState."""
    return copy.deepcopy(INITIAL_STATE)
