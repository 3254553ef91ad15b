"""Blueprint Formatter — renders the project state as a Markdown blueprint."""

from pathlib import Path

from launchpad.config import get_config
from launchpad.controller import infer_phase
from launchpad.state import ProjectState

_PHASE_LABELS = {
    "idea": "Idea & D3 check",
    "content": "Fake demo video",
    "demand": "Demand gate",
    "mvp": "MVP build",
}


def high_intent_rate(comments: int, wants: int) -> float | None:
    """Share of comments that are high intent, or None when there are no comments.

    Counts are used as entered; wants > comments gives a rate above 1.
    """
    if not comments:
        return None
    return wants / comments


def render_blueprint(state: ProjectState) -> str:
    """Convert the project state into a Markdown blueprint."""
    lines = []

    lines.append("# Startup Validation Blueprint")
    lines.append("")
    lines.append(f"**Current phase:** {_PHASE_LABELS[infer_phase(state)]}")
    lines.append("")

    if state.get("niche"):
        lines.append("## Niche")
        lines.append("")
        lines.append(state["niche"])
        lines.append("")

    if state.get("idea"):
        lines.append("## Idea")
        lines.append("")
        lines.append(state["idea"])
        lines.append("")

    if state.get("d3_analysis"):
        lines.append("## D3 Analysis")
        lines.append("")
        lines.append(state["d3_analysis"])
        lines.append("")

    if state.get("video_script"):
        lines.append("## Fake Demo Script")
        lines.append("")
        lines.append(state["video_script"])
        lines.append("")

    demand = state.get("demand_data") or {}
    if demand.get("comments") or demand.get("wants") or demand.get("feedback"):
        comments = demand.get("comments", 0)
        wants = demand.get("wants", 0)
        lines.append("## Demand Signal")
        lines.append("")
        lines.append("| Metric | Value |")
        lines.append("|--------|-------|")
        lines.append(f"| Total comments | {comments} |")
        lines.append(f"| High-intent comments | {wants} |")
        rate = high_intent_rate(comments, wants)
        if rate is not None:
            lines.append(f"| High-intent rate | {rate:.0%} |")
        lines.append("")
        if demand.get("feedback"):
            lines.append(f"**Feedback:** {demand['feedback']}")
            lines.append("")

    if state.get("demand_analysis"):
        decision = "GO" if state.get("is_go") else "NO GO"
        lines.append(f"## Demand Verdict — {decision}")
        lines.append("")
        lines.append(state["demand_analysis"])
        lines.append("")

    if state.get("mvp_specs"):
        lines.append("## MVP Plan & Prototype")
        lines.append("")
        lines.append(state["mvp_specs"])
        lines.append("")

    return "\n".join(lines)


def write_blueprint(state: ProjectState, output_path: str | Path | None = None) -> Path:
    """Render the blueprint and write it to output_path (default from config).

    Parent directories are created as needed. An existing file is overwritten.
    """
    config = get_config()
    path = Path(output_path or config.get("output_path", "./output/blueprint.md"))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_blueprint(state), encoding="utf-8")
    return path
