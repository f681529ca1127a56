"""
Instance Size Escalator
Next-larger instance sizes for AWS, Azure, GCP, Nutanix and OpenStack
"""

from escalator.engine import InstanceSizeEscalator, escalate
from escalator.errors import (
    EscalationError,
    GrammarContractError,
    InstanceTypeNotSupportedError,
    InstanceTypeUnsupportedFormatError,
    MissingInstanceSizeError,
    UnsupportedPlatformError,
)
from escalator.platforms import Platform

__version__ = "0.1.0"

__all__ = [
    "EscalationError",
    "GrammarContractError",
    "InstanceSizeEscalator",
    "InstanceTypeNotSupportedError",
    "InstanceTypeUnsupportedFormatError",
    "MissingInstanceSizeError",
    "Platform",
    "UnsupportedPlatformError",
    "escalate",
]
