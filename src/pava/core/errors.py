from __future__ import annotations


class PAVAError(ValueError):
    """Base class for caller contract violations."""


class LengthMismatchError(PAVAError):
    pass


class EmptyInputError(PAVAError):
    pass


class InvalidWeightError(PAVAError):
    pass


class InvalidValueError(PAVAError):
    pass


class CenterIndexError(PAVAError):
    pass
