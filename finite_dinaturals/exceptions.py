"""
Errors raised when finite functions are built or composed incorrectly.

Both are construction errors: the search itself only ever builds
well-typed functions, so seeing one of these means a caller misused
the public constructors.
"""


class FiniteFunctionError(ValueError):
    """Base class for finite function errors."""


class InvalidFunction(FiniteFunctionError):
    """A value array entry lies outside its stated codomain."""


class TypeMismatch(FiniteFunctionError):
    """Two functions cannot be composed: codomain and domain sizes differ."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compose {left!r} with {right!r}: "
            f"target size {left.tgt} != source size {right.src}"
        )
