"""
AWS Instance Types
Next size for EC2 instance types such as m6i.large or c5.4xlarge
"""

from dataclasses import dataclass, replace
from typing import Optional

from escalator.errors import InstanceTypeNotSupportedError, InstanceTypeUnsupportedFormatError
from escalator.grammar import InstanceGrammar, to_int

# <family>.<multiplier?><size>, e.g. m6i.2xlarge, m7i-flex.large
GRAMMAR = InstanceGrammar(
    "aws",
    r"(?P<family>[a-z0-9]+(?:-[a-z0-9]+)*)\.(?P<multiplier>\d+)?(?P<size>[a-z]+)",
    required=("family", "size"),
    optional=("multiplier",),
)

# Only xlarge takes a multiplier (2xlarge, 16xlarge)
MULTIPLIED_SIZE = "xlarge"

# Bare sizes and what they step to before a multiplier appears
BARE_SIZE_STEPS = {
    "large": (None, "xlarge"),
    "xlarge": (2, "xlarge"),
}


@dataclass(frozen=True)
class AWSInstanceType:
    """Parsed EC2 instance type"""
    family: str
    size: str
    multiplier: Optional[int] = None

    def __str__(self) -> str:
        multiplier = "" if self.multiplier is None else str(self.multiplier)
        return f"{self.family}.{multiplier}{self.size}"


def parse(identifier: str) -> AWSInstanceType:
    fields = GRAMMAR.parse(identifier)
    multiplier = fields["multiplier"]
    if multiplier is not None and fields["size"] != MULTIPLIED_SIZE:
        raise InstanceTypeUnsupportedFormatError(identifier)
    return AWSInstanceType(
        family=fields["family"],
        size=fields["size"],
        multiplier=None if multiplier is None else to_int("multiplier", multiplier, identifier),
    )


def successor(current: AWSInstanceType) -> AWSInstanceType:
    """
    Step an instance type to the next size in its family.

    In AWS terms this means doubling the underlying instance:
    large -> xlarge -> 2xlarge -> 4xlarge -> 8xlarge ...
    Bare sizes other than large and xlarge (medium, metal, ...) have no
    defined successor.
    """
    if current.multiplier is None:
        if current.size not in BARE_SIZE_STEPS:
            raise InstanceTypeNotSupportedError(str(current))
        multiplier, size = BARE_SIZE_STEPS[current.size]
        return replace(current, multiplier=multiplier, size=size)

    if current.multiplier < 1:
        raise InstanceTypeNotSupportedError(str(current))

    return replace(current, multiplier=current.multiplier * 2)


def next_instance_type(current: str) -> str:
    """Get the next AWS instance type in the series"""
    return str(successor(parse(current)))
