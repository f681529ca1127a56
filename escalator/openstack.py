"""
OpenStack Flavors
OpenStack flavors have no ordering to step through, so a larger flavor
has to be named up front
"""

from typing import Optional

from escalator.errors import MissingInstanceSizeError

FLAVOR_ALTERNATE_ENV = "OPENSTACK_CONTROLPLANE_FLAVOR_ALTERNATE"


def next_flavor(current: Optional[str], alternate: Optional[str]) -> str:
    """Swap the current flavor for the configured alternate"""
    if alternate is None or not alternate.strip():
        raise MissingInstanceSizeError(
            current,
            detail=f"{FLAVOR_ALTERNATE_ENV} environment variable not set: instance size is missing",
        )
    return alternate.strip()
