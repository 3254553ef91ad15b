"""Entry point: validates input, runs the pipeline, persists the project and writes the blueprint."""

import argparse
import sys
from pathlib import Path

from launchpad.config import get_config
from launchpad.controller import infer_phase
from launchpad.graph import graph, project_fields, route_after_demand, run_single_step
from launchpad.state import initial_state
from launchpad.store import StateStore
from launchpad.utils.formatter import write_blueprint
from launchpad.utils.parsing import extract_code_block
from launchpad.utils.validator import parse_count, validate_input


def _collect_demand_input() -> dict:
    """Prompt in the terminal for the results of the posted demo video.

    Returns either {"raw_comments": ...} or {"demand_data": {...}}; an empty
    dict means the user has no results yet.
    """
    print("\n--- Demand gate: post the demo, then report what came back ---\n")
    print("  1. Paste the raw comments (AI counts them)")
    print("  2. Enter the numbers yourself")
    print("  3. Stop here, I have not posted yet")

    while True:
        choice = input("Your choice (number): ").strip()
        if choice in ("1", "2", "3"):
            break
        print("Please enter 1, 2 or 3.")

    if choice == "1":
        print("Paste the comments (Ctrl+D / Ctrl+Z to submit):")
        return {"raw_comments": sys.stdin.read()}

    if choice == "2":
        comments = parse_count(input("Total comments: "))
        wants = parse_count(input("High-intent comments ('I want this'): "))
        feedback = input("Qualitative feedback: ").strip()
        return {"demand_data": {"comments": comments, "wants": wants, "feedback": feedback}}

    return {}


def _run_interactive(state: dict) -> dict:
    """Step through the pipeline, pausing at the demand gate for results."""
    if not state["idea"]:
        state = run_single_step(state, "ideas")
        print(f"\n[Launchpad] Generated ideas:\n{state['idea']}\n")

    state = run_single_step(state, "analyze_idea")
    print(f"\n[Launchpad] D3 analysis:\n{state['d3_analysis']}\n")

    state = run_single_step(state, "script")
    print(f"\n[Launchpad] Fake demo script:\n{state['video_script']}\n")

    if not state.get("raw_comments") and not state["demand_data"]["comments"]:
        state = {**state, **_collect_demand_input()}

    if state.get("raw_comments"):
        state = run_single_step(state, "metrics")
        demand = state["demand_data"]
        print(
            f"[Launchpad] Extracted {demand['comments']} comments, "
            f"{demand['wants']} high intent — {demand['feedback']}"
        )

    if not state["demand_data"]["comments"]:
        return state

    state = run_single_step(state, "demand")
    print(f"\n[Launchpad] Demand verdict:\n{state['demand_analysis']}\n")

    if route_after_demand(state) == "mvp":
        state = run_single_step(state, "mvp")

    return state


def run(
    idea: str,
    niche: str,
    raw_comments: str | None = None,
    comments=None,
    wants=None,
    feedback: str = "",
    hitl: bool | None = None,
    store: StateStore | None = None,
) -> dict:
    """Run the full validation pipeline for one idea.

    Args:
        idea: The startup idea. Empty asks the AI for ideas first.
        niche: Target audience. Required.
        raw_comments: Comment dump from the posted video, counted by the AI.
        comments, wants, feedback: Manually collected demand metrics.
        hitl: Override for the demand-gate prompt. None uses config default.
        store: Where the project is persisted. Defaults to the configured store.

    Returns the final project state.
    """
    config = get_config()
    hitl_enabled = hitl if hitl is not None else config.get("hitl_enabled", True)
    validated_niche = validate_input(niche, field="niche")

    state = initial_state()
    state["idea"] = (idea or "").strip()
    state["niche"] = validated_niche
    if raw_comments:
        state["raw_comments"] = raw_comments
    elif comments is not None:
        state["demand_data"] = {
            "comments": parse_count(comments),
            "wants": parse_count(wants),
            "feedback": feedback or "",
        }

    if not hitl_enabled:
        final_state = graph.invoke(state)
    else:
        final_state = _run_interactive(state)

    project = project_fields(final_state)
    store = store or StateStore()
    store.save(project)

    output_path = write_blueprint(project)
    print(f"[Launchpad] Phase: {infer_phase(project)}")
    print(f"[Launchpad] Demand gate: {'GO' if project['is_go'] else 'NO GO / not reached'}")
    print(f"[Launchpad] Project saved to: {store.path}")
    print(f"[Launchpad] Blueprint written to: {output_path}")

    prototype = extract_code_block(project.get("mvp_specs") or "")
    if prototype:
        prototype_path = Path(output_path).parent / "index.html"
        prototype_path.write_text(prototype, encoding="utf-8")
        print(f"[Launchpad] Prototype written to: {prototype_path}")

    return project


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchpad",
        description="Validate a startup idea: D3 check, fake demo, demand gate, MVP plan.",
    )
    parser.add_argument("idea", nargs="*", help="The startup idea. Omit to let the AI suggest ideas.")
    parser.add_argument("--niche", required=True, help="Target audience.")
    parser.add_argument("--comments-file", help="File with the raw comments from the demo video.")
    parser.add_argument("--comments", help="Total comment count.")
    parser.add_argument("--wants", default="0", help="High-intent comment count.")
    parser.add_argument("--feedback", default="", help="Qualitative feedback summary.")
    parser.add_argument(
        "--no-hitl",
        action="store_true",
        help="Run headless; never stop to ask for demand results.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)

    raw_comments = None
    if args.comments_file:
        raw_comments = Path(args.comments_file).read_text(encoding="utf-8")

    try:
        run(
            " ".join(args.idea),
            args.niche,
            raw_comments=raw_comments,
            comments=args.comments,
            wants=args.wants,
            feedback=args.feedback,
            hitl=False if args.no_hitl else None,
        )
    except ValueError as exc:
        print(f"[Launchpad] {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
