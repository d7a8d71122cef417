# MIT License (see LICENSE)
import numpy as np
import pytest

from dragfall import HistoryLog, Snapshot


def test_seeded_log():
    log = HistoryLog(Snapshot(0.0, 0.0, 0.0))
    assert len(log) == 1
    assert log.last == Snapshot(0.0, 0.0, 0.0)


def test_append_requires_later_time():
    log = HistoryLog(Snapshot(0.0, 0.0, 0.0))
    log.append(Snapshot(0.49, 0.0245, 0.05))
    with pytest.raises(ValueError):
        log.append(Snapshot(1.0, 0.1, 0.05))
    assert len(log) == 2


def test_views_are_copies():
    log = HistoryLog(Snapshot(0.0, 0.0, 0.0))
    log.append(Snapshot(0.49, 0.0245, 0.05))

    view = log.snapshots()
    velocities = log.velocities()
    velocities[0] = 99.0
    log.append(Snapshot(0.98, 0.07, 0.10))

    assert len(view) == 2
    assert log[0].velocity == 0.0
    np.testing.assert_allclose(log.times(), [0.0, 0.05, 0.10])
    np.testing.assert_allclose(log.displacements(), [0.0, 0.0245, 0.07])
    assert [s.velocity for s in log] == [0.0, 0.49, 0.98]


def test_reset_reseeds():
    log = HistoryLog(Snapshot(0.0, 0.0, 0.0))
    log.append(Snapshot(0.49, 0.0245, 0.05))
    log.reset(Snapshot(0.0, 0.0, 0.0))
    assert log.snapshots() == (Snapshot(0.0, 0.0, 0.0),)
