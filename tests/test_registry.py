"""
Tests for the region flag table.
"""

import pytest

from zonecheck.models.enums import RegionFlag
from zonecheck.zonedata.registry import (
    FLAG_NAMES,
    NAME_TO_FLAG,
    REGION_PREFIXES,
    constant_name,
    has_regions,
    is_all,
    parse_mask,
    prefixes_for,
)


def test_all_is_union_of_regions():
    """ALL carries every region bit and nothing else."""
    combined = RegionFlag(0)
    for flag in REGION_PREFIXES:
        combined |= flag
    assert combined == RegionFlag.ALL
    assert not RegionFlag.ALL & RegionFlag.PER_COUNTRY


def test_is_all_is_superset_test():
    """is_all needs every region bit, not just any bit."""
    assert is_all(RegionFlag.ALL)
    assert is_all(RegionFlag.ALL | RegionFlag.PER_COUNTRY)
    assert is_all(2047)

    assert not is_all(RegionFlag.EUROPE)
    assert not is_all(RegionFlag.EUROPE | RegionFlag.ASIA)
    assert not is_all(RegionFlag.PER_COUNTRY)
    assert not is_all(int(RegionFlag.ALL) & ~int(RegionFlag.UTC))
    assert not is_all(0)


def test_has_regions():
    """Control flags alone carry no region."""
    assert has_regions(RegionFlag.EUROPE)
    assert has_regions(RegionFlag.PER_COUNTRY | RegionFlag.ASIA)
    assert not has_regions(RegionFlag.PER_COUNTRY)
    assert not has_regions(0)


def test_prefixes_for_single_and_combined():
    """Each region bit maps to its identifier prefix."""
    assert prefixes_for(RegionFlag.EUROPE) == {"Europe"}
    assert prefixes_for(RegionFlag.EUROPE | RegionFlag.AMERICA) == {"Europe", "America"}
    assert prefixes_for(RegionFlag.UTC) == {"UTC"}


def test_prefixes_for_control_flags():
    """PER_COUNTRY never yields a prefix; ALL yields all of them."""
    assert prefixes_for(RegionFlag.PER_COUNTRY) == set()
    assert prefixes_for(RegionFlag.PER_COUNTRY | RegionFlag.ASIA) == {"Asia"}
    assert prefixes_for(RegionFlag.ALL) == set(REGION_PREFIXES.values())
    assert "ALL" not in prefixes_for(RegionFlag.ALL)


def test_name_tables_are_inverse():
    """Both directions of the name table agree."""
    assert len(FLAG_NAMES) == len(NAME_TO_FLAG)
    for flag, name in FLAG_NAMES.items():
        assert NAME_TO_FLAG[name] == flag


def test_constant_name():
    """Exact flags show their name, anything else echoes the raw value."""
    assert constant_name(RegionFlag.EUROPE) == "EUROPE"
    assert constant_name(128) == "EUROPE"
    assert constant_name(RegionFlag.ALL) == "ALL"
    assert constant_name(RegionFlag.PER_COUNTRY) == "PER_COUNTRY"

    combined = RegionFlag.EUROPE | RegionFlag.ASIA
    assert constant_name(combined) == combined
    assert constant_name(3) == 3
    assert constant_name(1 << 20) == 1 << 20


def test_parse_mask_names():
    """Symbolic names are parsed case-insensitively and combined."""
    assert parse_mask("EUROPE") == RegionFlag.EUROPE
    assert parse_mask("europe | Asia") == RegionFlag.EUROPE | RegionFlag.ASIA
    assert parse_mask("PER_COUNTRY|AMERICA") == RegionFlag.PER_COUNTRY | RegionFlag.AMERICA
    assert parse_mask("ALL") == RegionFlag.ALL


def test_parse_mask_ints():
    """Integers and flags pass through."""
    assert parse_mask(128) == RegionFlag.EUROPE
    assert parse_mask(RegionFlag.ALL) == RegionFlag.ALL
    assert isinstance(parse_mask(130), RegionFlag)


def test_parse_mask_rejects_garbage():
    """Unknown names, stray bits and other types are rejected."""
    with pytest.raises(ValueError):
        parse_mask("EUROPA")
    with pytest.raises(ValueError):
        parse_mask("EUROPE||ASIA")
    with pytest.raises(ValueError):
        parse_mask(1 << 20)
    with pytest.raises(ValueError):
        parse_mask(True)
    with pytest.raises(ValueError):
        parse_mask(1.5)
