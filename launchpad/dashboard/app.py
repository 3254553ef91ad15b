"""Vibe Launchpad — Streamlit wizard for validating a startup idea in 14 days."""

import sys
from pathlib import Path

# Add project root to path so 'launchpad' package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

import streamlit as st

from launchpad.controller import PhaseController
from launchpad.state import PHASES
from launchpad.utils.formatter import render_blueprint, high_intent_rate
from launchpad.utils.parsing import extract_code_block

st.set_page_config(page_title="Vibe Launchpad", layout="wide")
st.title("Vibe Launchpad")
st.markdown(
    "**Content first, product later.** Check the idea against the D³ formula, "
    "post a fake demo, let the comments decide, and only then build the MVP."
)

if "controller" not in st.session_state:
    st.session_state["controller"] = PhaseController()

controller: PhaseController = st.session_state["controller"]


# ---------------------------------------------------------------------------
# Helper renderers
# ---------------------------------------------------------------------------

_STEPS = {
    "idea": ("Idea & D³", "Day 1-3"),
    "content": ("Demo video", "Day 4-5"),
    "demand": ("Demand check", "Day 6-7"),
    "mvp": ("Build MVP", "Week 2"),
}


def _render_step_indicator() -> None:
    """Show the four phases with the current one highlighted."""
    current = PHASES.index(controller.phase)
    st.progress(current / (len(PHASES) - 1))
    for index, (column, phase) in enumerate(zip(st.columns(len(PHASES)), PHASES)):
        label, sub = _STEPS[phase]
        if index < current:
            column.markdown(f"✅ **{label}**  \n{sub}")
        elif index == current:
            column.markdown(f"🔵 **{label}**  \n{sub}")
        else:
            column.markdown(f"⚪ {label}  \n{sub}")


def _render_section_header(title: str, desc: str) -> None:
    st.subheader(title)
    st.caption(desc)


def _render_ai_output(content: str | None) -> None:
    """Show the last AI response for the current phase, if any."""
    if not content:
        return
    with st.container(border=True):
        st.caption("AI agent output")
        st.markdown(content)


def _run_action(label: str, action) -> None:
    """Run a controller action behind a spinner, then redraw."""
    with st.spinner(label):
        action()
    st.rerun()


# ---------------------------------------------------------------------------
# Phase panels
# ---------------------------------------------------------------------------


def _render_idea_panel() -> None:
    _render_section_header(
        "Step 1: Idea & D³ check",
        "Day 1-3: don't build yet. Check whether people would even react.",
    )
    state = controller.state

    niche = st.text_input(
        "Target audience / niche",
        value=state["niche"],
        placeholder="e.g. bored office workers, Gen Z students...",
    )
    if niche != state["niche"]:
        controller.update(niche=niche)

    if st.button("✨ Let the AI suggest ideas", disabled=controller.busy):
        _run_action("Brainstorming ideas...", controller.generate_ideas)

    idea = st.text_area(
        "Startup idea",
        value=state["idea"],
        height=160,
        placeholder="Describe your idea, or let the AI suggest a few...",
    )
    if idea != state["idea"]:
        controller.update(idea=idea)

    if st.button("Run D³ analysis", type="primary", disabled=not controller.can_analyze_idea()):
        _run_action("Consulting the validator agent...", controller.analyze_idea)

    state = controller.state
    _render_ai_output(state["d3_analysis"])

    if controller.can_advance():
        if st.button("Passed. On to the next step →"):
            controller.advance()
            st.rerun()


def _render_content_panel() -> None:
    _render_section_header(
        "Step 2: Fake demo video",
        "Day 4-5: a video that looks like the app exists, to test real demand.",
    )
    st.info(
        "No app code yet. Cut the demo together in CapCut or Figma so it looks "
        "like the product already exists."
    )

    if st.button("🚀 Write a viral demo script", type="primary", disabled=controller.busy):
        _run_action("Writing the script...", controller.generate_script)

    state = controller.state
    _render_ai_output(state["video_script"])

    if controller.can_advance():
        st.caption("Post it on TikTok / Reels, then wait 48 hours for comments.")
        if st.button("Posted. Continue →"):
            controller.advance()
            st.rerun()


def _render_demand_inputs() -> None:
    """Manual entry or AI-assisted extraction of the comment metrics."""
    if st.session_state.pop("close_raw_input", False):
        st.session_state["use_ai_comments"] = False
    use_ai = st.toggle("Let the AI read the comments", key="use_ai_comments")

    if use_ai:
        raw_comments = st.text_area(
            "Paste every comment here",
            key="raw_comments",
            height=200,
            placeholder="Copy the comments from the video...",
        )
        if st.button("Fill in automatically", disabled=not controller.can_extract_metrics(raw_comments)):
            with st.spinner("Reading the comments..."):
                controller.extract_metrics(raw_comments)
            st.session_state["close_raw_input"] = True
            st.rerun()
        return

    demand = controller.state["demand_data"]
    comments = st.number_input("Total comments", value=demand["comments"], step=1)
    wants = st.number_input("Comments saying 'I want this'", value=demand["wants"], step=1)
    feedback = st.text_area(
        "Qualitative feedback",
        value=demand["feedback"],
        height=100,
        placeholder="Paste a few representative comments...",
    )
    if (comments, wants, feedback) != (demand["comments"], demand["wants"], demand["feedback"]):
        controller.set_demand_data(comments=comments, wants=wants, feedback=feedback)


def _render_gate_criteria() -> None:
    demand = controller.state["demand_data"]
    with st.container(border=True):
        st.markdown("**Gate criteria**")
        left, right = st.columns(2)
        left.metric("Comments", demand["comments"], help="Target: 100+")
        rate = high_intent_rate(demand["comments"], demand["wants"])
        right.metric(
            "High-intent rate",
            f"{rate:.0%}" if rate is not None else "—",
            help="Target: 10% or more",
        )
        st.caption("*If nobody argues, nobody wants it.*")

    with st.container(border=True):
        st.markdown("**Sorting helper**")
        high, low = st.columns(2)
        high.markdown(
            "High intent (count these)\n"
            "- \"Where can I download it?\"\n"
            "- \"Take my money!\"\n"
            "- \"I've wanted this forever\"\n"
            "- \"Is there an iOS version?\""
        )
        low.markdown(
            "Low intent (skip these)\n"
            "- \"Nice video\"\n"
            "- \"So funny lol\"\n"
            "- \"Great editing\"\n"
            "- (just tagging a friend)"
        )


def _render_demand_panel() -> None:
    _render_section_header(
        "Step 3: Demand gate",
        "Day 6-7: read the signal. Do people actually want it?",
    )

    inputs, criteria = st.columns(2)
    with inputs:
        _render_demand_inputs()
        if st.button(
            "Analyze demand signal",
            type="primary",
            disabled=not controller.can_analyze_demand(),
        ):
            _run_action("Weighing the evidence...", controller.analyze_demand)
    with criteria:
        _render_gate_criteria()

    state = controller.state
    _render_ai_output(state["demand_analysis"])

    if state["demand_analysis"]:
        abandon, proceed = st.columns(2)
        if abandon.button("Abandon idea & start over"):
            controller.abandon()
            st.rerun()
        if state["is_go"]:
            if proceed.button("GO! On to week 2 →", type="primary"):
                controller.advance()
                st.rerun()
        else:
            proceed.warning("Demand signal too weak. Don't write code yet.")


def _render_mvp_panel() -> None:
    _render_section_header(
        "Step 4: MVP spec & prototype",
        "Week 2: shameful but sellable.",
    )
    st.success("Validation passed! 🚀 People want it. Let the AI plan and code the MVP.")

    state = controller.state
    if not state["mvp_specs"]:
        if st.button(
            "Generate MVP plan & code",
            type="primary",
            disabled=not controller.can_generate_mvp_plan(),
        ):
            _run_action("Architecting the MVP...", controller.generate_mvp_plan)

    _render_ai_output(state["mvp_specs"])

    if state["mvp_specs"]:
        st.divider()
        st.caption("*An embarrassing MVP that people pay for is the right product.*")
        st.download_button(
            label="Download blueprint",
            data=render_blueprint(state),
            file_name="blueprint.md",
            mime="text/markdown",
        )
        prototype = extract_code_block(state["mvp_specs"])
        if prototype:
            st.download_button(
                label="Download prototype (index.html)",
                data=prototype,
                file_name="index.html",
                mime="text/html",
            )


# ---------------------------------------------------------------------------
# Page logic, driven by the controller's phase
# ---------------------------------------------------------------------------

with st.sidebar:
    st.markdown("**Project**")
    st.caption(f"Saved to `{controller.store.path}`")
    if st.button("Start a new project"):
        controller.reset()
        st.rerun()

_render_step_indicator()
st.divider()

_PANELS = {
    "idea": _render_idea_panel,
    "content": _render_content_panel,
    "demand": _render_demand_panel,
    "mvp": _render_mvp_panel,
}

_PANELS[controller.phase]()
