"""
Identifier Grammar
Named-group parsing shared by the per-provider pipelines
"""

import re
from typing import Dict, Optional, Pattern, Tuple

from escalator.errors import GrammarContractError, InstanceTypeUnsupportedFormatError


class InstanceGrammar:
    """
    Strict parser for one provider's identifier scheme.

    The whole identifier must match ``pattern``. Every name in ``required``
    must have captured text; names in ``optional`` come back as ``None``
    when the group did not take part in the match, which keeps "absent"
    apart from an empty or zero value.
    """

    def __init__(self, name: str, pattern: str, required: Tuple[str, ...],
                 optional: Tuple[str, ...] = ()):
        self.name = name
        self.regex: Pattern[str] = re.compile(pattern)
        self.required = required
        self.optional = optional

        declared = set(required) | set(optional)
        if set(self.regex.groupindex) != declared:
            raise ValueError(
                f"{name} grammar groups {sorted(self.regex.groupindex)} "
                f"do not match declared fields {sorted(declared)}"
            )

    def parse(self, identifier: str) -> Dict[str, Optional[str]]:
        """Split an identifier into its named fields or fail with a format error"""
        if not isinstance(identifier, str):
            raise InstanceTypeUnsupportedFormatError(identifier)

        match = self.regex.fullmatch(identifier)
        if match is None:
            raise InstanceTypeUnsupportedFormatError(identifier)

        fields = match.groupdict()
        if len(fields) != len(self.required) + len(self.optional):
            raise InstanceTypeUnsupportedFormatError(identifier)
        for name in self.required:
            if not fields.get(name):
                raise InstanceTypeUnsupportedFormatError(identifier)

        return fields


def to_int(field: str, value: str, identifier: str) -> int:
    """Convert a grammar-guaranteed digit run"""
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise GrammarContractError(field, value, identifier) from e


def to_float(field: str, value: str, identifier: str) -> float:
    """Convert a grammar-guaranteed decimal"""
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise GrammarContractError(field, value, identifier) from e
