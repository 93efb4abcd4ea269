from dataclasses import FrozenInstanceError


"""
Models are immutable once built, the same way the frozen config dataclasses
are: attributes are written once in __init__ through _setFields() and any
later assignment or deletion raises FrozenInstanceError.
"""

class FrozenModel:
    def _setFields(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise FrozenInstanceError(f"cannot assign to field {name!r} of {type(self).__name__}")

    def __delattr__(self, name):
        raise FrozenInstanceError(f"cannot delete field {name!r} of {type(self).__name__}")
