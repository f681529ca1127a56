"""
Escalation Errors
Typed failures raised while computing the next instance size
"""

from typing import Any, Optional


class EscalationError(Exception):
    """Base class for every escalation failure a caller is expected to handle"""

    kind = "EscalationError"
    description = "instance size escalation failed"

    def __init__(self, identifier: Any = None, detail: Optional[str] = None):
        self.identifier = identifier
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        message = self.detail or self.description
        if self.identifier is None:
            return message
        return f"{message}: {self.identifier}"


class UnsupportedPlatformError(EscalationError):
    """The platform discriminator is not one the engine knows about"""

    kind = "UnsupportedPlatform"
    description = "unsupported platform"


class InstanceTypeUnsupportedFormatError(EscalationError):
    """
    The identifier does not match the grammar of its provider.

    Each platform has its own naming scheme; an identifier outside it
    cannot be increased.
    """

    kind = "InstanceTypeUnsupportedFormat"
    description = "instance type did not match expected format"


class InstanceTypeNotSupportedError(EscalationError):
    """
    The identifier parsed, but there is no known successor for it.

    Either the ceiling for the family has been reached or the
    family/flavor combination has no stepping rule.
    """

    kind = "InstanceTypeNotSupported"
    description = "instance type is not supported"


class MissingInstanceSizeError(EscalationError):
    """A required size value (or the OpenStack alternate flavor) is absent"""

    kind = "MissingInstanceSize"
    description = "instance size is missing"


class GrammarContractError(RuntimeError):
    """
    A field the grammar guarantees to be numeric failed to convert.

    This means the pattern and the calculator disagree, which is a bug,
    not bad input, so it does not derive from EscalationError.
    """

    def __init__(self, field: str, value: str, identifier: str):
        self.field = field
        self.value = value
        self.identifier = identifier
        super().__init__(
            f"failed to convert {field} {value!r} of {identifier!r} to a number"
        )
