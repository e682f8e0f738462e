import math

import numpy as np
import pytest

from spotnav.sim.tracks import arc_track, polyline_track, straight_track


def test_straight_track_spacing_and_heading() -> None:
    samples = straight_track((1.0, 2.0), math.pi / 2, 1.0, 0.25)
    assert len(samples) == 5
    assert all(abs(s.theta - math.pi / 2) < 1e-12 for s in samples)
    assert np.allclose(samples[-1].translation, [1.0, 3.0])


@pytest.mark.parametrize("sweep", [1.0, -1.0])
def test_arc_track_stays_on_circle_and_is_tangent(sweep) -> None:
    samples = arc_track((0.0, 0.0), 0.0, radius=2.0, sweep=sweep, spacing=0.1)
    centre = np.array([0.0, 2.0 if sweep > 0 else -2.0])
    for s in samples:
        assert np.isclose(np.linalg.norm(s.translation - centre), 2.0)
    assert samples[0].theta == pytest.approx(0.0)
    assert np.sign(samples[-1].theta) == np.sign(sweep)
    # heading follows the chord direction between neighbours
    a, b = samples[3], samples[4]
    chord = math.atan2(b.y - a.y, b.x - a.x)
    assert chord == pytest.approx((a.theta + b.theta) / 2.0, abs=1e-9)


def test_polyline_track_resamples_corner() -> None:
    samples = polyline_track([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]], 0.25)
    assert len(samples) == 9
    assert samples[0].theta == pytest.approx(0.0)
    assert samples[-1].theta == pytest.approx(math.pi / 2)
    assert np.allclose(samples[-1].translation, [1.0, 1.0])
    gaps = [np.linalg.norm(b.translation - a.translation) for a, b in zip(samples, samples[1:])]
    assert np.allclose(gaps, 0.25)


def test_polyline_track_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        polyline_track([[0.0, 0.0, 0.0]], 0.1)
    with pytest.raises(ValueError):
        polyline_track([[0.0, 0.0]], 0.1)
