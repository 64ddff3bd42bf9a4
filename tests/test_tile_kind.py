import pytest

from voxeltile.tile_kind import TileKind


@pytest.mark.parametrize(
    "name, kind",
    [
        ("solo", TileKind.SOLO),
        ("end", TileKind.END),
        ("straight", TileKind.STRAIGHT),
        ("corner", TileKind.CORNER),
        ("tee", TileKind.TEE),
        ("cross", TileKind.CROSS),
    ],
)
def test_from_name_known(name, kind):
    assert TileKind.from_name(name) is kind


@pytest.mark.parametrize("name", ["", "Solo", "CROSS", "junction", "tee "])
def test_from_name_unknown(name):
    assert TileKind.from_name(name) is None


def test_every_kind_round_trips_through_its_name():
    assert [TileKind.from_name(k.value) for k in TileKind] == list(TileKind)