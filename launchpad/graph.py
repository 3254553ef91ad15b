"""LangGraph StateGraph for the headless idea → MVP pipeline.

Used by the CLI to run every phase in one go. The run ends early when there
are no demand results to judge yet, or when the demand gate says NO GO.
"""

from langgraph.graph import END, StateGraph

from launchpad.agents.content import generate_demo_script
from launchpad.agents.demand import analyze_demand, extract_comment_metrics
from launchpad.agents.ideation import analyze_idea, generate_ideas
from launchpad.agents.mvp import generate_mvp_plan
from launchpad.state import INITIAL_STATE, ProjectState


class PipelineState(ProjectState, total=False):
    raw_comments: str  # Optional comment dump; when present it replaces demand_data.


def _ideas_node(state: PipelineState) -> dict:
    return {"idea": generate_ideas(state["niche"])}


def _analyze_idea_node(state: PipelineState) -> dict:
    return {"d3_analysis": analyze_idea(state["idea"], state["niche"])}


def _script_node(state: PipelineState) -> dict:
    return {"video_script": generate_demo_script(state["idea"])}


def _metrics_node(state: PipelineState) -> dict:
    return {"demand_data": extract_comment_metrics(state["raw_comments"])}


def _demand_node(state: PipelineState) -> dict:
    demand = state["demand_data"]
    verdict = analyze_demand(demand["comments"], demand["wants"], demand["feedback"])
    return {"demand_analysis": verdict["analysis"], "is_go": verdict["is_go"]}


def _mvp_node(state: PipelineState) -> dict:
    return {"mvp_specs": generate_mvp_plan(state["idea"], state["demand_analysis"])}


def _route_start(state: PipelineState) -> str:
    """Generate ideas first only when the user brought none."""
    return "analyze_idea" if state.get("idea") else "ideas"


def _route_after_script(state: PipelineState) -> str:
    """Pasted comments go through AI extraction; entered counts go straight to the verdict.

    With neither, the run stops after the script: the video has to be posted
    and its comments collected before demand can be judged.
    """
    if state.get("raw_comments"):
        return "metrics"
    if state.get("demand_data", {}).get("comments"):
        return "demand"
    return "end"


def _route_after_metrics(state: PipelineState) -> str:
    """An extraction that found no comments leaves nothing to judge."""
    return "demand" if state["demand_data"]["comments"] else "end"


def _route_after_demand(state: PipelineState) -> str:
    """The demand gate: only a GO verdict earns an MVP plan."""
    return "mvp" if state.get("is_go") else "end"


# --- Build the graph ---

workflow = StateGraph(PipelineState)

workflow.add_node("ideas", _ideas_node)
workflow.add_node("analyze_idea", _analyze_idea_node)
workflow.add_node("script", _script_node)
workflow.add_node("metrics", _metrics_node)
workflow.add_node("demand", _demand_node)
workflow.add_node("mvp", _mvp_node)

workflow.set_conditional_entry_point(
    _route_start,
    {"ideas": "ideas", "analyze_idea": "analyze_idea"},
)

workflow.add_edge("ideas", "analyze_idea")
workflow.add_edge("analyze_idea", "script")

workflow.add_conditional_edges(
    "script",
    _route_after_script,
    {"metrics": "metrics", "demand": "demand", "end": END},
)

workflow.add_conditional_edges(
    "metrics",
    _route_after_metrics,
    {"demand": "demand", "end": END},
)

workflow.add_conditional_edges(
    "demand",
    _route_after_demand,
    {"mvp": "mvp", "end": END},
)

workflow.add_edge("mvp", END)

graph = workflow.compile()


def project_fields(state: PipelineState) -> ProjectState:
    """Strip pipeline-only keys so the result can be persisted."""
    return {key: value for key, value in state.items() if key in INITIAL_STATE}


# --- Step-execution helpers for the interactive CLI loop ---

_NODE_FNS = {
    "ideas": _ideas_node,
    "analyze_idea": _analyze_idea_node,
    "script": _script_node,
    "metrics": _metrics_node,
    "demand": _demand_node,
    "mvp": _mvp_node,
}


def run_single_step(state: PipelineState, node_name: str) -> PipelineState:
    """Run a single node and return the updated state.

    Used by the CLI for step-by-step execution with a pause at the demand gate.
    """
    node_fn = _NODE_FNS[node_name]
    updates = node_fn(state)
    return {**state, **updates}


def route_after_demand(state: PipelineState) -> str:
    """Public wrapper around _route_after_demand for manual loop usage."""
    return _route_after_demand(state)
