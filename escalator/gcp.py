"""
GCP Machine Types
Next size for predefined (n2-standard-4) and custom (n2-custom-4-12288)
machine types
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple

from escalator.errors import InstanceTypeNotSupportedError
from escalator.grammar import InstanceGrammar, to_float, to_int

# <family>-<subfamily>(-<subfamilyflavor>)-<multiplier>(-<multiplier2>)
GRAMMAR = InstanceGrammar(
    "gcp",
    r"(?P<family>[0-9a-z]+)-(?P<subfamily>[0-9a-z]+(?:-(?P<subfamilyflavor>[a-z]+))?)"
    r"-(?P<multiplier>[0-9]+(?:\.[0-9]+)?)(?:-(?P<multiplier2>[0-9]+))?",
    required=("family", "subfamily", "multiplier"),
    optional=("subfamilyflavor", "multiplier2"),
)

# Memory given to a custom machine per vCPU after a step. This is a
# comfortable bump chosen for tests, not a platform limit.
CUSTOM_MEMORY_MB_PER_VCPU = 3 * 1024

# Memory ceilings of the shared-core E2 custom flavors
E2_SHARED_CORE_MAX_MEMORY_MB = {
    "micro": 2 * 1024,
    "small": 4 * 1024,
    "medium": 8 * 1024,
}
E2_SHARED_CORE_MEMORY_STEP_MB = 1024


@dataclass(frozen=True)
class GCPMachineType:
    """
    Parsed GCP machine type.

    ``subfamily`` keeps the flavor attached (``custom-micro``) so it can be
    written back unchanged; ``flavor`` is the flavor on its own.
    ``memory_mb`` is only present on custom machine types.
    """
    family: str
    subfamily: str
    vcpus: float
    flavor: Optional[str] = None
    memory_mb: Optional[int] = None
    fractional_vcpus: bool = False

    @property
    def is_custom(self) -> bool:
        return self.subfamily.startswith("custom")

    def __str__(self) -> str:
        if self.fractional_vcpus:
            vcpus = f"{self.vcpus:.2f}"
        else:
            vcpus = str(int(self.vcpus))
        name = f"{self.family}-{self.subfamily}-{vcpus}"
        if self.memory_mb is not None:
            name = f"{name}-{self.memory_mb}"
        return name


def parse(identifier: str) -> GCPMachineType:
    fields = GRAMMAR.parse(identifier)
    multiplier2 = fields["multiplier2"]
    return GCPMachineType(
        family=fields["family"],
        subfamily=fields["subfamily"],
        flavor=fields["subfamilyflavor"],
        vcpus=to_float("multiplier", fields["multiplier"], identifier),
        memory_mb=None if multiplier2 is None else to_int("multiplier2", multiplier2, identifier),
        fractional_vcpus="." in fields["multiplier"],
    )


# Custom machine types

def _with_vcpus(current: GCPMachineType, vcpus: int) -> GCPMachineType:
    # At a vCPU cap only the recomputed memory can still grow.
    memory_mb = vcpus * CUSTOM_MEMORY_MB_PER_VCPU
    if vcpus <= int(current.vcpus) and memory_mb <= current.memory_mb:
        raise InstanceTypeNotSupportedError(str(current))
    return replace(
        current,
        vcpus=vcpus,
        memory_mb=memory_mb,
        fractional_vcpus=False,
    )


def _step_n1(current: GCPMachineType) -> GCPMachineType:
    # Above 1 vCPU N1 custom types grow in steps of 2. The platform allows 96
    # on Skylake but only 64 on older CPUs, and the CPU is not known here.
    vcpus = int(current.vcpus)
    if vcpus < 64:
        vcpus += 2
    return _with_vcpus(current, vcpus)


def _step_n2(current: GCPMachineType) -> GCPMachineType:
    # Multiples of 2 up to 32 vCPUs, multiples of 4 above that, 80 at most.
    vcpus = int(current.vcpus)
    if vcpus < 32:
        vcpus += 2
    elif vcpus <= 76:
        vcpus += 4
    return _with_vcpus(current, vcpus)


N2D_VCPU_LADDER = {2: 4, 4: 8, 8: 16}
N2D_MAX_VCPUS = 96


def _step_n2d(current: GCPMachineType) -> GCPMachineType:
    # 2, 4, 8 or 16 vCPUs, then steps of 16 up to 96.
    vcpus = int(current.vcpus)
    if vcpus in N2D_VCPU_LADDER:
        vcpus = N2D_VCPU_LADDER[vcpus]
    elif vcpus < N2D_MAX_VCPUS:
        vcpus = min(vcpus + 16, N2D_MAX_VCPUS)
    return _with_vcpus(current, vcpus)


def _step_e2(current: GCPMachineType) -> GCPMachineType:
    # Multiples of 2 up to 32 vCPUs.
    vcpus = int(current.vcpus)
    if vcpus < 32:
        vcpus += 2
    return _with_vcpus(current, vcpus)


def _step_e2_shared_core(current: GCPMachineType) -> GCPMachineType:
    # Shared-core flavors keep their vCPU fraction and only gain memory.
    ceiling = E2_SHARED_CORE_MAX_MEMORY_MB[current.flavor]
    if current.memory_mb >= ceiling:
        raise InstanceTypeNotSupportedError(str(current))

    return replace(
        current,
        memory_mb=current.memory_mb + E2_SHARED_CORE_MEMORY_STEP_MB,
        fractional_vcpus=current.flavor != "medium",
    )


CustomStep = Callable[[GCPMachineType], GCPMachineType]

# (family, flavor) -> stepping rule for custom machine types
CUSTOM_STEPS: Dict[Tuple[str, Optional[str]], CustomStep] = {
    ("n1", None): _step_n1,
    ("n2", None): _step_n2,
    ("n2d", None): _step_n2d,
    ("e2", None): _step_e2,
    ("e2", "micro"): _step_e2_shared_core,
    ("e2", "small"): _step_e2_shared_core,
    ("e2", "medium"): _step_e2_shared_core,
}


def _next_custom(current: GCPMachineType) -> GCPMachineType:
    if not current.vcpus or not current.memory_mb:
        raise InstanceTypeNotSupportedError(str(current))

    step = CUSTOM_STEPS.get((current.family, current.flavor))
    if step is None:
        raise InstanceTypeNotSupportedError(str(current))
    return step(current)


# Predefined machine types

def _next_predefined_vcpus(family: str, vcpus: int) -> Optional[int]:
    """Next vCPU count for a predefined type, None when there is none"""
    if family == "e2" and vcpus >= 32:
        return None
    if family == "n2" and vcpus == 32:
        return 48
    if family == "n2" and vcpus == 64:
        return 80
    if vcpus in (64, 80):
        return 96
    if family == "n1" and vcpus >= 96:
        return None
    if vcpus == 96:
        return 128
    if vcpus >= 128:
        return None
    return vcpus * 2


def _next_predefined(current: GCPMachineType) -> GCPMachineType:
    if current.memory_mb is not None or current.fractional_vcpus or current.vcpus < 1:
        raise InstanceTypeNotSupportedError(str(current))

    vcpus = _next_predefined_vcpus(current.family, int(current.vcpus))
    if vcpus is None:
        raise InstanceTypeNotSupportedError(str(current))
    return replace(current, subfamily="standard", flavor=None, vcpus=vcpus)


def successor(current: GCPMachineType) -> GCPMachineType:
    """
    Step a machine type to the next size.

    Custom machine types grow their vCPU count (and memory with it) by the
    rules of each series, except the shared-core E2 flavors which only grow
    memory. Predefined machine types double their vCPU count, with fixed
    steps near the top of each series, and come out as
    <family>-standard-<vcpus>.
    """
    if current.is_custom:
        return _next_custom(current)
    return _next_predefined(current)


def next_machine_type(current: str) -> str:
    """Get the next GCP machine type in the series"""
    return str(successor(parse(current)))
