"""Resolution of logical region/platform keys to Riot API hosts."""

from types import MappingProxyType
from typing import List, Mapping

from .enums import LogicalPlatform, LogicalRegion
from .errors import InvalidTopologyKey


REGION_HOSTS: Mapping[str, str] = MappingProxyType(
    {region.value: region.host for region in LogicalRegion}
)

PLATFORM_HOSTS: Mapping[str, str] = MappingProxyType(
    {platform.value: platform.host for platform in LogicalPlatform}
)


def valid_regions() -> List[str]:
    """Get every accepted region key, in table order."""
    return list(REGION_HOSTS)


def valid_platforms() -> List[str]:
    """Get every accepted platform key, in table order."""
    return list(PLATFORM_HOSTS)


def resolve_region_host(key: str) -> str:
    """Resolve a region key to its routing host.

    Lookup is exact and case-sensitive.

    Raises:
        InvalidTopologyKey: If the key is not a known region
    """
    try:
        return REGION_HOSTS[key]
    except (KeyError, TypeError):
        raise InvalidTopologyKey("region", key, valid_regions()) from None


def resolve_platform_host(key: str) -> str:
    """Resolve a platform key to its routing host.

    Raises:
        InvalidTopologyKey: If the key is not a known platform
    """
    try:
        return PLATFORM_HOSTS[key]
    except (KeyError, TypeError):
        raise InvalidTopologyKey("platform", key, valid_platforms()) from None
