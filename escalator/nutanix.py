"""
Nutanix vCPU Sockets
Nutanix machines are sized by socket count rather than a named type
"""

from typing import Union

from escalator.errors import InstanceTypeUnsupportedFormatError

VCPUSockets = Union[int, str]


def next_vcpu_sockets(current: VCPUSockets) -> VCPUSockets:
    """
    Add one vCPU socket.

    There is no ceiling. A digit string comes back as a string so it can be
    written straight back to wherever it was read from.
    """
    if isinstance(current, bool):
        raise InstanceTypeUnsupportedFormatError(current)

    if isinstance(current, int):
        sockets = current
    elif isinstance(current, str) and current.strip().isdigit():
        sockets = int(current.strip())
    else:
        raise InstanceTypeUnsupportedFormatError(current)

    if sockets < 1:
        raise InstanceTypeUnsupportedFormatError(current)

    if isinstance(current, str):
        return str(sockets + 1)
    return sockets + 1
