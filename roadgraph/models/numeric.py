"""
Numeric capabilities for coordinate values.

A Numeric describes how the formulas of the models operate on one number
representation (builtin float, numpy float32, numpy float64, ...), so the
same distance and WKT code runs at several floating precisions.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, Type, TypeVar
import math

import numpy as np

from ..config import NUMERIC_LITERALS, WKT_DECIMALS


T = TypeVar('T')


class NumericCapabilityError(TypeError):
    """
    A number type cannot provide what the models need.

    Raised when one of the fixed literals cannot be represented exactly
    or when no capability is registered for a value's type. This is a
    programming error in the caller's numeric setup, never a data error.
    """


class Numeric(ABC, Generic[T]):
    """Operations a coordinate number type must support."""

    name: str = 'numeric'

    def from_literal(self, value: float) -> T:
        """
        Convert one of the fixed literals into this representation.

        Literals are taken as 32-bit floats. The conversion must be exact,
        otherwise NumericCapabilityError is raised.
        """
        literal = float(np.float32(value))
        try:
            converted = self._convert(literal)
            exact = float(converted) == literal
        except (TypeError, ValueError, OverflowError) as exc:
            raise NumericCapabilityError(
                f"{self.name} cannot represent literal {literal!r}") from exc
        if not exact:
            raise NumericCapabilityError(
                f"{self.name} cannot represent literal {literal!r} "
                f"(got {converted!r})")
        return converted

    def check_literals(self) -> None:
        """Convert every fixed literal once, failing loudly on the first miss."""
        for literal in NUMERIC_LITERALS:
            self.from_literal(literal)

    @abstractmethod
    def _convert(self, value: float) -> T:
        pass

    @abstractmethod
    def to_radians(self, value: T) -> T:
        pass

    @abstractmethod
    def sin(self, value: T) -> T:
        pass

    @abstractmethod
    def cos(self, value: T) -> T:
        pass

    @abstractmethod
    def sqrt(self, value: T) -> T:
        pass

    @abstractmethod
    def atan2(self, y: T, x: T) -> T:
        pass

    def sum(self, values: Iterable[T]) -> T:
        total = self.from_literal(0.0)
        for value in values:
            total = total + value
        return total

    def format(self, value: T) -> str:
        """Render with exactly WKT_DECIMALS digits after the decimal point."""
        return f"{float(value):.{WKT_DECIMALS}f}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class PythonFloat(Numeric[float]):
    """Builtin float with the math module."""

    name = 'float'

    def _convert(self, value: float) -> float:
        return float(value)

    def to_radians(self, value: float) -> float:
        return math.radians(value)

    # math raises on inf and negative roots, the models expect NaN instead
    def sin(self, value: float) -> float:
        if math.isinf(value):
            return math.nan
        return math.sin(value)

    def cos(self, value: float) -> float:
        if math.isinf(value):
            return math.nan
        return math.cos(value)

    def sqrt(self, value: float) -> float:
        if value < 0:
            return math.nan
        return math.sqrt(value)

    def atan2(self, y: float, x: float) -> float:
        return math.atan2(y, x)


class NumpyFloat(Numeric[np.floating]):
    """A numpy floating scalar type (float32, float64, ...)."""

    def __init__(self, dtype: Type[np.floating]):
        self.dtype = dtype
        self.name = np.dtype(dtype).name

    def _convert(self, value: float) -> np.floating:
        with np.errstate(over='ignore'):
            return self.dtype(value)

    def to_radians(self, value: np.floating) -> np.floating:
        return np.radians(value)

    def sin(self, value: np.floating) -> np.floating:
        with np.errstate(invalid='ignore'):
            return np.sin(value)

    def cos(self, value: np.floating) -> np.floating:
        with np.errstate(invalid='ignore'):
            return np.cos(value)

    def sqrt(self, value: np.floating) -> np.floating:
        with np.errstate(invalid='ignore'):
            return np.sqrt(value)

    def atan2(self, y: np.floating, x: np.floating) -> np.floating:
        return np.arctan2(y, x)


PYTHON_FLOAT = PythonFloat()
FLOAT32 = NumpyFloat(np.float32)
FLOAT64 = NumpyFloat(np.float64)

_REGISTRY: Dict[type, Numeric] = {
    float: PYTHON_FLOAT,
    int: PYTHON_FLOAT,
    np.float32: FLOAT32,
    np.float64: FLOAT64,
}


def register_numeric(value_type: type, numeric: Numeric) -> None:
    """Make numeric_for() resolve value_type to numeric."""
    numeric.check_literals()
    _REGISTRY[value_type] = numeric


def numeric_for(value) -> Numeric:
    """Find the capability for a coordinate value by its type."""
    for cls in type(value).__mro__:
        numeric = _REGISTRY.get(cls)
        if numeric is not None:
            return numeric
    raise NumericCapabilityError(
        f"No numeric capability registered for {type(value).__name__}")
