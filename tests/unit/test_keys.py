"""Unit tests for key construction and conversion helpers."""

from __future__ import annotations

import pytest

from recordfs import ComKey, InvalidKeyError, LocKey, PriKey, is_com_key, key_from_dict, key_to_dict

pytestmark = pytest.mark.unit


def test_com_key_normalises_location_mappings() -> None:
    key = ComKey(type="comment", identifier="c-1", locations=[{"type": "post", "identifier": "p-1"}])

    assert key.locations == (LocKey(type="post", identifier="p-1"),)
    assert is_com_key(key)
    assert not is_com_key(PriKey("post", "p-1"))
    assert str(key) == "post/p-1/comment/c-1"


def test_keys_are_hashable_and_comparable() -> None:
    first = ComKey("comment", "c-1", [LocKey("post", "p-1")])
    second = ComKey("comment", "c-1", (LocKey("post", "p-1"),))

    assert first == second
    assert len({first, second}) == 1


@pytest.mark.parametrize(
    "factory",
    [
        lambda: PriKey(type="", identifier="x"),
        lambda: PriKey(type="user", identifier=""),
        lambda: PriKey(type="user", identifier=5),
        lambda: ComKey(type="comment", identifier="c", locations=[{"type": "post"}]),
        lambda: ComKey(type="comment", identifier="c", locations=["post"]),
        lambda: ComKey(type="comment", identifier="c", locations="post"),
    ],
)
def test_malformed_keys_raise(factory) -> None:
    with pytest.raises(InvalidKeyError):
        factory()


def test_key_dict_round_trip() -> None:
    primary = PriKey("user", "u-1")
    composite = ComKey("comment", "c-1", [LocKey("post", "p-1")])

    assert key_to_dict(primary) == {"type": "user", "identifier": "u-1"}
    assert key_to_dict(composite) == {
        "type": "comment",
        "identifier": "c-1",
        "locations": [{"type": "post", "identifier": "p-1"}],
    }
    assert key_from_dict(key_to_dict(primary)) == primary
    assert key_from_dict(key_to_dict(composite)) == composite
