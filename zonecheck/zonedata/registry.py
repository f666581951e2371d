"""
Region flag table: name prefixes, superset test and symbolic names.
"""

from typing import Dict, Set, Union

from zonecheck.models.enums import RegionFlag


# Region flag -> identifier prefix (identifiers look like "<prefix>/<city>")
REGION_PREFIXES: Dict[RegionFlag, str] = {
    RegionFlag.AFRICA: "Africa",
    RegionFlag.AMERICA: "America",
    RegionFlag.ANTARCTICA: "Antarctica",
    RegionFlag.ARCTIC: "Arctic",
    RegionFlag.ASIA: "Asia",
    RegionFlag.ATLANTIC: "Atlantic",
    RegionFlag.AUSTRALIA: "Australia",
    RegionFlag.EUROPE: "Europe",
    RegionFlag.INDIAN: "Indian",
    RegionFlag.PACIFIC: "Pacific",
    RegionFlag.UTC: "UTC",
}

FLAG_NAMES: Dict[RegionFlag, str] = {
    RegionFlag.AFRICA: "AFRICA",
    RegionFlag.AMERICA: "AMERICA",
    RegionFlag.ANTARCTICA: "ANTARCTICA",
    RegionFlag.ARCTIC: "ARCTIC",
    RegionFlag.ASIA: "ASIA",
    RegionFlag.ATLANTIC: "ATLANTIC",
    RegionFlag.AUSTRALIA: "AUSTRALIA",
    RegionFlag.EUROPE: "EUROPE",
    RegionFlag.INDIAN: "INDIAN",
    RegionFlag.PACIFIC: "PACIFIC",
    RegionFlag.UTC: "UTC",
    RegionFlag.ALL: "ALL",
    RegionFlag.PER_COUNTRY: "PER_COUNTRY",
}

NAME_TO_FLAG: Dict[str, RegionFlag] = {name: flag for flag, name in FLAG_NAMES.items()}

MaskLike = Union[RegionFlag, int]


def is_all(mask: MaskLike) -> bool:
    """
    Check whether a mask covers every region.

    This is a superset test: ``ALL | PER_COUNTRY`` is "all", ``EUROPE`` or
    ``ALL & ~UTC`` are not.
    """
    return RegionFlag.ALL & int(mask) == RegionFlag.ALL


def has_regions(mask: MaskLike) -> bool:
    """Check whether a mask carries at least one geographic bit."""
    return bool(RegionFlag.ALL & int(mask))


def prefixes_for(mask: MaskLike) -> Set[str]:
    """
    Get identifier prefixes for every region bit set in a mask.

    ALL and PER_COUNTRY are control flags and never produce a prefix of their
    own; ALL still contributes through its region bits.

    Args:
        mask: Region flags, combined with ``|``

    Returns:
        Set of prefixes such as {"Europe", "Asia"}
    """
    value = int(mask)
    return {
        prefix
        for flag, prefix in REGION_PREFIXES.items()
        if flag & value == flag
    }


def constant_name(mask: MaskLike) -> Union[str, int]:
    """
    Get the symbolic name of a single flag, for display.

    Combined masks with no exact table entry come back as the raw value.
    """
    try:
        return FLAG_NAMES[RegionFlag(int(mask))]
    except (KeyError, ValueError):
        return mask


def parse_mask(value: Union[MaskLike, str]) -> RegionFlag:
    """
    Parse a region mask from configuration.

    Args:
        value: A RegionFlag, an int, or symbolic names joined by "|"
            (e.g. "EUROPE|ASIA", case-insensitive)

    Returns:
        Combined RegionFlag

    Raises:
        ValueError: On an unknown name or a value outside the known flags
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid region mask: {value!r}")

    if isinstance(value, int):
        known = int(RegionFlag.ALL | RegionFlag.PER_COUNTRY)
        if value & ~known:
            raise ValueError(f"Invalid region mask: {value}")
        return RegionFlag(value)

    if isinstance(value, str):
        names = [part.strip().upper() for part in value.split("|")]
        if not all(names):
            raise ValueError(f"Invalid region mask: {value!r}")

        mask = RegionFlag(0)
        for name in names:
            if name not in NAME_TO_FLAG:
                raise ValueError(f"Unknown region name: {name}")
            mask |= NAME_TO_FLAG[name]
        return mask

    raise ValueError(f"Invalid region mask: {value!r}")
