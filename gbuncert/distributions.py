''' Type B error distributions and their coverage factors

A Type B evaluation converts a stated limit error (half-width a) into a
standard uncertainty by dividing by the coverage factor k of the assumed
error distribution (GB/T 27411-2012):

    Uniform:            k = sqrt(3)
    Normal (95% conf.): k = 2
    Normal (99% conf.): k = 3

The factors are fixed by the distribution and cannot be tuned by the user.
'''
import logging
from enum import IntEnum
from dataclasses import dataclass

import numpy as np
import scipy.stats as stats

from .errors import InvalidDistribution
from .series import finite_float


class TypeBDistribution(IntEnum):
    ''' Assumed distribution of a Type B error. Integer codes follow the
        order of the distribution picker.
    '''
    UNIFORM = 0
    NORMAL95 = 1
    NORMAL99 = 2

    @property
    def k(self) -> float:
        ''' Coverage factor (divisor) for converting limit error to standard uncertainty '''
        return _kfactors[self]

    @property
    def label(self) -> str:
        ''' Display label, including the coverage factor '''
        return _labels[self]

    def frozen(self, limit_error: float):
        ''' Get the scipy.stats frozen distribution for a limit error of
            half-width `limit_error`. Its standard deviation equals the
            Type B standard uncertainty. Returns None if limit_error <= 0.
        '''
        if limit_error <= 0:
            return None
        if self == TypeBDistribution.UNIFORM:
            return stats.uniform(loc=-limit_error, scale=2*limit_error)
        return stats.norm(loc=0, scale=limit_error/self.k)


_kfactors = {
    TypeBDistribution.UNIFORM: np.sqrt(3),
    TypeBDistribution.NORMAL95: 2.0,
    TypeBDistribution.NORMAL99: 3.0,
}

_labels = {
    TypeBDistribution.UNIFORM: 'Uniform (k=√3)',
    TypeBDistribution.NORMAL95: 'Normal 95% (k=2)',
    TypeBDistribution.NORMAL99: 'Normal 99% (k=3)',
}

_aliases = {
    'uniform': TypeBDistribution.UNIFORM,
    'rectangular': TypeBDistribution.UNIFORM,
    'normal95': TypeBDistribution.NORMAL95,
    'normal-95': TypeBDistribution.NORMAL95,
    'normal99': TypeBDistribution.NORMAL99,
    'normal-99': TypeBDistribution.NORMAL99,
}


def get_distribution(code) -> TypeBDistribution:
    ''' Resolve a distribution from an enum member, integer code, or name.

        Args:
            code: TypeBDistribution, int (0, 1, 2), or name such as
                'uniform', 'normal95', 'normal99'

        Raises:
            InvalidDistribution: if code does not identify one of the
                three supported distributions
    '''
    if isinstance(code, TypeBDistribution):
        return code

    if isinstance(code, str):
        name = code.strip()
        if name.isdigit():
            return get_distribution(int(name))
        for dist in TypeBDistribution:
            if name == dist.label:
                return dist
        try:
            return _aliases[name.lower()]
        except KeyError:
            raise InvalidDistribution(
                f'Unknown distribution "{code}". Choose from {", ".join(names())}') from None

    if isinstance(code, (int, np.integer)) and not isinstance(code, bool):
        try:
            return TypeBDistribution(int(code))
        except ValueError:
            raise InvalidDistribution(f'Distribution code must be 0, 1, or 2, got {code}') from None

    raise InvalidDistribution(f'Unknown distribution {code!r}')


def names() -> list[str]:
    ''' Canonical distribution names in picker order '''
    return [d.name.lower() for d in TypeBDistribution]


@dataclass(frozen=True)
class TypeBSpec:
    ''' Type B inputs for one calculation

        Attributes:
            limit_error: Limit error (half-width) of the Type B component.
                Values <= 0 mean no Type B contribution.
            distribution: Assumed error distribution. Any value accepted by
                get_distribution is converted to a TypeBDistribution.
    '''
    limit_error: float = 0.0
    distribution: TypeBDistribution = TypeBDistribution.UNIFORM

    def __post_init__(self):
        object.__setattr__(self, 'limit_error', finite_float(self.limit_error, 'Limit error'))
        object.__setattr__(self, 'distribution', get_distribution(self.distribution))
        if self.limit_error < 0:
            logging.warning(f'Negative limit error {self.limit_error} treated as no Type B contribution')

    @property
    def k(self) -> float:
        ''' Coverage factor of the distribution '''
        return self.distribution.k
