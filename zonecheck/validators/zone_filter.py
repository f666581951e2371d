"""
Region filtering of timezone identifier lists.
"""

from typing import FrozenSet, Iterable

from zonecheck.models.enums import ZoneSource
from zonecheck.zonedata.catalog import TimezoneCatalog
from zonecheck.zonedata.registry import MaskLike, is_all, prefixes_for


def _in_prefixes(identifier: str, prefixes: Iterable[str]) -> bool:
    name = identifier.lower()
    for prefix in prefixes:
        lowered = prefix.lower()
        # The bare prefix counts too, so "UTC" belongs to the UTC region
        if name == lowered or name.startswith(lowered + "/"):
            return True
    return False


def matches_zone(identifier: str, mask: MaskLike) -> bool:
    """
    Check if an identifier falls inside the regions of a mask.

    Prefixes are compared case-insensitively.
    """
    if is_all(mask):
        return True
    return _in_prefixes(identifier, prefixes_for(mask))


def filter_zone(catalog: TimezoneCatalog, source: ZoneSource, mask: MaskLike) -> FrozenSet[str]:
    """
    Restrict a source's identifiers to the regions of a mask.

    Args:
        catalog: Timezone catalog
        source: PLATFORM or ICU
        mask: Region flags, combined with ``|``

    Returns:
        Identifiers from the source whose name starts with a selected region
    """
    identifiers = catalog.all_identifiers(source)

    if is_all(mask):
        return frozenset(identifiers)

    prefixes = prefixes_for(mask)
    if not prefixes:
        return frozenset()

    return frozenset(
        identifier for identifier in identifiers if _in_prefixes(identifier, prefixes)
    )
