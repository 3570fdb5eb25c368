from __future__ import annotations


class ParseError(ValueError):
    """A representation contains a character that is neither a digit nor a separator."""

    def __init__(self, scalar: str, representation: str) -> None:
        self.scalar = scalar
        self.representation = representation
        super().__init__(
            f"{scalar!r} (U+{ord(scalar):04X}) is not a valid digit in {representation!r}."
        )
