from __future__ import annotations
import pytest

from eventflow_arcstar import Event, detect_and_compute
from eventflow_arcstar.config import DEFAULT_CONFIG, ArcStarConfig, RingSpec
from eventflow_arcstar.rings import RING3_OFFSETS, RING4_OFFSETS
from eventflow_arcstar.errors import ConfigError, VisionError

from sae_fixtures import SAE_OUTSIDE_CORNER_NE, sae


def test_defaults():
    cfg = ArcStarConfig.from_params(None)
    assert cfg == DEFAULT_CONFIG
    assert (cfg.ring3.size, cfg.ring3.min_arc, cfg.ring3.max_arc) == (16, 3, 6)
    assert (cfg.ring4.size, cfg.ring4.min_arc, cfg.ring4.max_arc) == (20, 4, 8)
    assert cfg.border == 4


def test_from_params_overrides():
    cfg = ArcStarConfig.from_params({"border": "6", "ring3_max_arc": 5})
    assert cfg.border == 6
    assert cfg.ring3.max_arc == 5
    assert cfg.ring4 == DEFAULT_CONFIG.ring4


@pytest.mark.parametrize(
    "params",
    [
        {"border": 3},
        {"ring3_min_arc": 0},
        {"ring3_min_arc": 5, "ring3_max_arc": 4},
        {"ring4_max_arc": 20},
        {"ring4_min_arc": "x"},
        {"radius": 5},
    ],
)
def test_invalid_params(params):
    with pytest.raises(ConfigError):
        ArcStarConfig.from_params(params)


def test_rings_must_build_full_descriptor():
    with pytest.raises(ConfigError):
        ArcStarConfig(ring3=RingSpec(4, 4, 8))
    with pytest.raises(VisionError):
        RingSpec(7, 3, 6).validate()


def test_wider_border_rejects_center_of_small_grid():
    evt = Event(row=4, col=4)
    assert detect_and_compute(sae(SAE_OUTSIDE_CORNER_NE), evt) is not None
    assert detect_and_compute(sae(SAE_OUTSIDE_CORNER_NE), evt, ArcStarConfig(border=5)) is None


def test_ring_spec_offsets_come_from_ring_tables():
    assert RingSpec(3, 3, 6).offsets is RING3_OFFSETS
    assert RingSpec(4, 4, 8).offsets is RING4_OFFSETS
    with pytest.raises(KeyError):
        RingSpec(5, 3, 6).offsets
