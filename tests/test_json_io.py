# MIT License (see LICENSE)
import json

import pytest

from dragfall import Session, SessionConfig, SimulationParameters, InvalidParameters
from dragfall.io import (
    load_session,
    save_session,
    session_from_json,
    session_to_json,
    config_to_json,
    history_to_json,
)
from dragfall.materials import drag_coefficient_for, PRESETS


def test_defaults_when_sections_missing():
    session = session_from_json({})
    assert session.params == SimulationParameters()
    assert session.config == SessionConfig()


def test_save_and_load(tmp_path):
    session = Session(
        params=SimulationParameters(mass=2.5, radius=0.2, drag_coefficient=1.05),
        config=SessionConfig(fixed_step=0.01, ground_px=500.0),
    )
    path = tmp_path / "drop.json"
    save_session(session, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["config"] == {"fixed_step": 0.01, "ground_px": 500.0}

    loaded = load_session(str(path))
    assert loaded.params == session.params
    assert loaded.config == session.config


def test_default_config_is_omitted():
    assert config_to_json(SessionConfig()) == {}
    assert "config" not in session_to_json(Session())


def test_material_overrides_drag_coefficient():
    session = session_from_json({"params": {"drag_coefficient": 0.1, "material": "Cube"}})
    assert session.params.drag_coefficient == 1.05


def test_unknown_keys_are_ignored():
    session = session_from_json({"config": {"tick_interval": 0.1, "colour": "red"}})
    assert session.config.tick_interval == 0.1


@pytest.mark.parametrize(
    "params",
    [{"mass": 0}, {"radius": -1}, {"mass": "heavy"}, {"material": "brick"}],
)
def test_invalid_params_rejected(params):
    with pytest.raises(InvalidParameters):
        session_from_json({"params": params})


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        session_from_json({"config": {"fixed_step": 0}})
    with pytest.raises(ValueError):
        session_from_json({"config": {"fixed_step": None}})


def test_history_export():
    session = Session()
    session.step()
    records = history_to_json(session.history)
    assert records[0] == {"t": 0.0, "v": 0.0, "s": 0.0}
    assert records[1]["v"] == pytest.approx(0.49)
    assert records[1]["s"] == pytest.approx(0.0245)
    json.dumps(records)


def test_material_presets():
    assert drag_coefficient_for("sphere") == 0.47
    assert drag_coefficient_for("none") == 0.0
    assert all(m.drag_coefficient >= 0 for m in PRESETS.values())


def test_zero_drag_preset_name():
    session = session_from_json({"params": {"material": "none"}})
    assert session.params.drag_coefficient == 0.0
    assert "none" in PRESETS
