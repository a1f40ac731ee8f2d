"""
model.py.

Does: Define the closed set of color models and resolve model names from text.
Returns: Model enum, find_model().
"""

from __future__ import annotations

from enum import Enum

from xcolor_expressions.errors import UnknownModelName

__all__ = ["Model", "find_model"]


class Model(Enum):
    GRAY = "gray"
    RGB = "rgb"
    CMYK = "cmyk"

    def __str__(self) -> str:
        return self.value

    @property
    def arity(self) -> int:
        """Does: Number of components a color of this model carries."""
        return _ARITY[self]


_ARITY = {Model.GRAY: 1, Model.RGB: 3, Model.CMYK: 4}


def find_model(name: str) -> Model:
    """Does: Match a display name ('gray', 'rgb', 'cmyk') after trimming spaces.
    Raises: UnknownModelName when nothing matches exactly.
    """
    name = name.strip(" ")
    for model in Model:
        if model.value == name:
            return model
    raise UnknownModelName(name)
