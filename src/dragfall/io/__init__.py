# MIT License (see LICENSE)
"""
JSON input/output for session configuration and run history.

Provides:
    - load_session / save_session: Session parameters and config from/to file.
    - session_to_json / session_from_json: The same, as dictionaries.
    - history_to_json: Recorded snapshots for an external charting front end.

Example:
    from dragfall.io import load_session

    session = load_session("drop.json")
    session.play()
"""
from .json_io import (
    load_session_raw,
    load_session,
    save_session,
    session_to_json,
    session_from_json,
    params_from_json,
    params_to_json,
    config_from_json,
    config_to_json,
    history_to_json,
)

__all__ = [
    "load_session_raw",
    "load_session",
    "save_session",
    "session_to_json",
    "session_from_json",
    "params_from_json",
    "params_to_json",
    "config_from_json",
    "config_to_json",
    "history_to_json",
]
