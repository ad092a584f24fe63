"""Package-specific exception types."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Malformation


class ExpansionError(ValueError):
    """Base class for errors raised around expansion.

    The expansion itself never fails; these errors come from the limits and
    checks a host integration applies to its fragments.
    """


class InputTooLongError(ExpansionError):
    """Raised when a fragment exceeds the configured maximum length.

    Args:
        length: Length of the offending fragment in characters.
        limit: Maximum allowed length in characters.
    """

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Input of {self.length} characters exceeds the limit of {self.limit}")


class MalformedGroupError(ExpansionError):
    """Raised in strict mode when a fragment contains malformed groups.

    Args:
        fragment: Normalized fragment that was scanned.
        malformations: Groups that were left as literal text.
    """

    def __init__(self, fragment: str, malformations: Sequence[Malformation]):
        self.fragment = fragment
        self.malformations = list(malformations)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        details = ", ".join(
            f"{item.kind.name.lower().replace('_', ' ')} at offset {item.offset}"
            for item in self.malformations
        )
        return f"Malformed group syntax in {self.fragment!r}: {details}"
