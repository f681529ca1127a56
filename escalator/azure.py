"""
Azure VM Sizes
Next size for Azure VM sizes such as Standard_D4s_v3
"""

from dataclasses import dataclass, replace
from typing import Optional

from escalator.errors import InstanceTypeNotSupportedError
from escalator.grammar import InstanceGrammar, to_int

GRAMMAR = InstanceGrammar(
    "azure",
    r"Standard_(?P<family>[a-zA-Z]+)(?P<multiplier>[0-9]+)(?P<subfamily>[a-z]*)(?P<version>_v[0-9]+)?",
    required=("family", "multiplier"),
    optional=("subfamily", "version"),
)

# Above 32 vCPUs the sizes stop doubling
STEPPED_MULTIPLIERS = {
    32: 48,
    48: 64,
}
MAX_MULTIPLIER = 64


@dataclass(frozen=True)
class AzureVMSize:
    """Parsed Azure VM size"""
    family: str
    multiplier: int
    subfamily: str = ""
    version: Optional[str] = None

    def __str__(self) -> str:
        return f"Standard_{self.family}{self.multiplier}{self.subfamily}{self.version or ''}"


def parse(identifier: str) -> AzureVMSize:
    fields = GRAMMAR.parse(identifier)
    return AzureVMSize(
        family=fields["family"],
        multiplier=to_int("multiplier", fields["multiplier"], identifier),
        subfamily=fields["subfamily"] or "",
        version=fields["version"],
    )


def successor(current: AzureVMSize) -> AzureVMSize:
    """Double the vCPU multiplier, following the 32 -> 48 -> 64 steps at the top"""
    if current.multiplier in STEPPED_MULTIPLIERS:
        return replace(current, multiplier=STEPPED_MULTIPLIERS[current.multiplier])
    if current.multiplier >= MAX_MULTIPLIER or current.multiplier < 1:
        raise InstanceTypeNotSupportedError(str(current))

    return replace(current, multiplier=current.multiplier * 2)


def next_vm_size(current: str) -> str:
    """Get the next Azure VM size in the series"""
    return str(successor(parse(current)))
