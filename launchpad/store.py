"""Project State Store — one JSON blob under a fixed key in local key/value storage.

Every save is a full overwrite. There is no schema version: blobs written by an
older build simply lack some keys, and the loader fills them from the defaults.
"""

import json
import sys
from pathlib import Path

from launchpad.config import get_config
from launchpad.state import ProjectState, initial_state

# Python key -> persisted key. The blob keeps the wizard's original camelCase shape.
_WIRE_KEYS = {
    "idea": "idea",
    "niche": "niche",
    "d3_analysis": "d3Analysis",
    "video_script": "videoScript",
    "demand_data": "demandData",
    "demand_analysis": "demandAnalysis",
    "is_go": "isGo",
    "mvp_specs": "mvpSpecs",
}

_TEXT_FIELDS = ("idea", "niche")
_OPTIONAL_TEXT_FIELDS = ("d3_analysis", "video_script", "demand_analysis", "mvp_specs")


def to_wire(state: ProjectState) -> dict:
    """Convert a ProjectState into its persisted JSON shape."""
    return {wire: state[key] for key, wire in _WIRE_KEYS.items()}


def from_wire(blob: dict) -> ProjectState:
    """Build a ProjectState from a persisted blob, defaulting absent or mistyped fields."""
    state = initial_state()

    for key in _TEXT_FIELDS:
        value = blob.get(_WIRE_KEYS[key])
        if isinstance(value, str):
            state[key] = value

    for key in _OPTIONAL_TEXT_FIELDS:
        value = blob.get(_WIRE_KEYS[key])
        if isinstance(value, str):
            state[key] = value

    is_go = blob.get(_WIRE_KEYS["is_go"])
    if isinstance(is_go, bool):
        state["is_go"] = is_go

    demand = blob.get(_WIRE_KEYS["demand_data"])
    if isinstance(demand, dict):
        for count_key in ("comments", "wants"):
            value = demand.get(count_key)
            # bool is an int subclass; a stray true/false is not a count
            if isinstance(value, int) and not isinstance(value, bool):
                state["demand_data"][count_key] = value
        feedback = demand.get("feedback")
        if isinstance(feedback, str):
            state["demand_data"]["feedback"] = feedback

    return state


class StateStore:
    """Loads and saves the ProjectState blob.

    The blob lives at ``<storage_dir>/<storage_key>.json``. Both default to the
    values in config.yaml.
    """

    def __init__(self, storage_dir: str | Path | None = None, key: str | None = None):
        config = get_config()
        self.storage_dir = Path(storage_dir or config.get("storage_dir", "./.launchpad"))
        self.key = key or config.get("storage_key", "vibeLaunchpadState")

    @property
    def path(self) -> Path:
        return self.storage_dir / f"{self.key}.json"

    def load(self) -> ProjectState:
        """Return the saved state, or the initial state if none can be read.

        Never raises: missing, unreadable or malformed data is logged and
        replaced by the defaults.
        """
        if not self.path.exists():
            return initial_state()

        try:
            blob = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            print(f"[Launchpad] Failed to load state from {self.path}: {exc!r}", file=sys.stderr)
            return initial_state()

        if not isinstance(blob, dict):
            print(
                f"[Launchpad] Ignoring stored state at {self.path}: "
                f"expected a JSON object, got {type(blob).__name__}.",
                file=sys.stderr,
            )
            return initial_state()

        return from_wire(blob)

    def save(self, state: ProjectState) -> None:
        """Overwrite the stored blob with the full state."""
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(to_wire(state), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def clear(self) -> None:
        """Delete the stored blob so the next load starts from defaults."""
        self.path.unlink(missing_ok=True)
