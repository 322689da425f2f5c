''' Series of repeated measurements used for Type A evaluation

    The series only stores finite real numbers. Text entered by a user is
    converted with `parse_measurement`, which raises InvalidInput instead
    of treating unparseable text as zero.
'''
import re
import numbers
from typing import Iterable

import numpy as np

from .errors import InvalidInput


def finite_float(value, name: str = 'Measurement') -> float:
    ''' Convert a real number to float, rejecting bools, NaN and Inf.

        Args:
            value: Number to check
            name: Description of the value used in the error message

        Raises:
            InvalidInput: if value is not a finite real number
    '''
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f'{name} must be a real number, got {value!r}')
    try:
        value = float(value)
    except OverflowError:
        raise InvalidInput(f'{name} is too large to represent as a float') from None
    if not np.isfinite(value):
        raise InvalidInput(f'{name} must be finite, got {value}')
    return value


def parse_measurement(text: str, name: str = 'Measurement') -> float:
    ''' Parse one user-entered measurement string into a float.

        Args:
            text: String such as "10.02" or " 1e-3 "
            name: Description of the value used in the error message

        Raises:
            InvalidInput: if the text is empty, not a number, NaN, or Inf
    '''
    if isinstance(text, numbers.Real) and not isinstance(text, bool):
        return finite_float(text, name)
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput(f'{name} is empty')
    try:
        value = float(text.strip())
    except ValueError:
        raise InvalidInput(f'{name} "{text.strip()}" is not a number') from None
    return finite_float(value, name)


def parse_measurements(text: str) -> list[float]:
    ''' Parse a block of text containing measurements separated by
        whitespace, commas, or semicolons.
    '''
    tokens = [t for t in re.split(r'[\s,;]+', text) if t]
    return [parse_measurement(t) for t in tokens]


def parse_decimals(value) -> int:
    ''' Number of decimal places for a report, from an int or digit string

        Raises:
            InvalidInput: if value is not a whole number >= 0
    '''
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise InvalidInput(f'Decimals must be a whole number >= 0, got {value!r}')
    return int(value)


class MeasurementSeries:
    ''' Ordered series of repeated measurements

        Args:
            values: Optional initial measurements
    '''
    def __init__(self, values: Iterable[float] = None):
        self._data: list[float] = []
        if values is not None:
            self.extend(values)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(list(self._data))

    def __repr__(self):
        return f'<MeasurementSeries n={len(self)}>'

    @property
    def count(self) -> int:
        ''' Number of stored measurements '''
        return len(self._data)

    @property
    def values(self) -> np.ndarray:
        ''' Copy of the stored measurements as a numpy array '''
        return np.array(self._data, dtype=float)

    def append(self, value: float) -> 'MeasurementSeries':
        ''' Append one measurement. The series is unchanged if value
            is rejected.

            Raises:
                InvalidInput: if value is not a finite real number
        '''
        self._data.append(finite_float(value))
        return self

    def extend(self, values: Iterable[float]) -> 'MeasurementSeries':
        ''' Append several measurements. All are validated before any is stored. '''
        checked = [finite_float(v) for v in values]
        self._data.extend(checked)
        return self

    def reset(self) -> None:
        ''' Discard all measurements '''
        self._data = []

    def entries(self) -> list[tuple[int, float]]:
        ''' List of (index, value) with 1-based indices in append order '''
        return [(i+1, v) for i, v in enumerate(self._data)]
