import logging
from pathlib import Path

import pytest

from spotnav.config import ApproachConfig, GuidanceConfig, TrackConfig
from spotnav.constants import TRACK_LOOKAHEAD
from spotnav.utils.config import load_config_dict, load_guidance_config

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs" / "guidance"


def test_defaults() -> None:
    cfg = GuidanceConfig()
    assert cfg.track.lookahead == TRACK_LOOKAHEAD == 20
    assert cfg.approach.deadband == "heading"
    assert cfg.approach.allow_reverse


def test_from_dict_nested_and_top_level_overrides() -> None:
    cfg = GuidanceConfig.from_dict(
        {"light_radius": 0.3, "lookahead": 12, "approach": {"variant": "dock", "distance_gain": 0.8}}
    )
    assert cfg.light_radius == pytest.approx(0.3)
    assert cfg.track.lookahead == 12
    assert cfg.approach.speed_law == "distance"
    assert cfg.approach.distance_gain == pytest.approx(0.8)
    assert not cfg.approach.allow_reverse


def test_from_dict_empty_is_default() -> None:
    assert GuidanceConfig.from_dict(None) == GuidanceConfig()


def test_variants_do_not_share_state() -> None:
    a = ApproachConfig.variant("line", reverse_reach=1.0)
    b = ApproachConfig.variant("line")
    assert a.reverse_reach == 1.0
    assert b.reverse_reach == 0.5
    assert b.closing_scale == 1.0 and b.deadband == "side"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"closing_scale": 0.0},
        {"closing_scale": 1.5},
        {"max_speed": 0.0},
        {"pivot_speed": 2.0},
        {"reverse_reach": -1.0},
    ],
)
def test_invalid_approach_values_rejected(kwargs) -> None:
    with pytest.raises(AssertionError):
        ApproachConfig(**kwargs)


def test_unknown_names_rejected() -> None:
    with pytest.raises(ValueError):
        ApproachConfig(deadband="angle")
    with pytest.raises(ValueError):
        ApproachConfig(speed_law="linear")
    with pytest.raises(ValueError):
        ApproachConfig.variant("racing")


def test_invalid_track_and_radius_rejected() -> None:
    with pytest.raises(AssertionError):
        TrackConfig(lookahead=0)
    with pytest.raises(AssertionError):
        GuidanceConfig(light_radius=-0.1)


def test_repo_configs_load() -> None:
    default = load_guidance_config(str(CONFIG_DIR / "default.yaml"))
    assert default.light_radius == pytest.approx(0.2)
    assert default.approach.heading_deadband == pytest.approx(0.0872665)
    line = load_guidance_config(str(CONFIG_DIR / "line.yaml"))
    assert line.approach.deadband == "side"
    dock = load_guidance_config(str(CONFIG_DIR / "dock.yaml"))
    assert dock.approach.speed_law == "distance"


def test_dotlist_overrides() -> None:
    cfg = load_guidance_config(
        str(CONFIG_DIR / "default.yaml"), ["light_radius=0.25", "approach.variant=line", "track.lookahead=8"]
    )
    assert cfg.light_radius == pytest.approx(0.25)
    assert cfg.track.lookahead == 8
    # default.yaml sets no variant-derived keys, so the line variant applies whole
    assert cfg.approach.closing_scale == pytest.approx(1.0)
    assert cfg.approach.deadband == "side"
    assert cfg.approach.reverse_reach == pytest.approx(0.5)


def test_explicit_key_shadowing_variant_is_warned(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="spotnav.config"):
        cfg = GuidanceConfig.from_dict({"approach": {"variant": "line", "deadband": "heading", "max_speed": 0.5}})
    assert cfg.approach.deadband == "heading"
    assert cfg.approach.max_speed == pytest.approx(0.5)
    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 1
    assert "approach.deadband" in messages[0] and "'line'" in messages[0]


def test_overrides_without_file() -> None:
    cfg = load_guidance_config(None, ["approach.variant=dock"])
    assert cfg.approach.allow_reverse is False


def test_load_config_dict_requires_mapping(tmp_path) -> None:
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config_dict(str(p))
    q = tmp_path / "ok.yaml"
    q.write_text("light_radius: 0.5\n")
    assert load_config_dict(str(q)) == {"light_radius": 0.5}
