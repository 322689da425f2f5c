''' Type A and Type B measurement uncertainty per GB/T 27411-2012

    Type A: standard uncertainty of the mean of repeated measurements,
        u_A = s / sqrt(n), with s the experimental standard deviation.
    Type B: limit error divided by the coverage factor of the assumed
        error distribution, u_B = a / k.
    Combined: u_c = sqrt(u_A**2 + u_B**2), assuming independent components.
    Expanded: U = 2 * u_c (approximately 95% confidence), independent of the
        Type B distribution's own k.
'''
import logging
from typing import Sequence

import numpy as np

from .errors import InsufficientData
from .series import MeasurementSeries
from .distributions import TypeBSpec
from .results import UncertaintyReport


EXPANDED_K = 2


def mean(values: Sequence[float]) -> float:
    ''' Arithmetic mean. 0.0 for an empty series. '''
    values = np.asarray(values, dtype=float)
    if len(values) == 0:
        return 0.0
    return float(values.sum() / len(values))


def sample_std_dev(values: Sequence[float], mean: float) -> float:
    ''' Experimental standard deviation, (n-1) denominator. 0.0 when n <= 1. '''
    values = np.asarray(values, dtype=float)
    n = len(values)
    if n <= 1:
        return 0.0
    return float(np.sqrt(((values - mean)**2).sum() / (n - 1)))


def typea_uncertainty(values: Sequence[float], std_dev: float) -> float:
    ''' Type A standard uncertainty of the mean, s/sqrt(n). 0.0 when n == 0.

        Note this is the uncertainty of the mean, not of a single measurement.
    '''
    n = len(values)
    if n == 0:
        return 0.0
    return float(std_dev / np.sqrt(n))


def typeb_uncertainty(spec: TypeBSpec) -> float:
    ''' Type B standard uncertainty, limit_error / k. 0.0 when limit_error <= 0. '''
    if spec.limit_error <= 0:
        return 0.0
    return float(spec.limit_error / spec.distribution.k)


def combined_uncertainty(u_a: float, u_b: float) -> float:
    ''' Root-sum-square of independent components '''
    return float(np.sqrt(u_a*u_a + u_b*u_b))


def compute_report(series, spec: TypeBSpec) -> UncertaintyReport:
    ''' Calculate the combined and expanded uncertainty.

        Args:
            series: MeasurementSeries or sequence of measurements. A copy
                is taken, the series is not modified.
            spec: Type B limit error and distribution

        Returns:
            UncertaintyReport

        Raises:
            InsufficientData: if fewer than 2 measurements are available
    '''
    if isinstance(series, MeasurementSeries):
        values = series.values
    else:
        values = MeasurementSeries(series).values

    n = len(values)
    if n < 2:
        raise InsufficientData(f'At least 2 measurements are required, got {n}')

    xbar = mean(values)
    std_dev = sample_std_dev(values, xbar)
    u_a = typea_uncertainty(values, std_dev)
    u_b = typeb_uncertainty(spec)
    u_c = combined_uncertainty(u_a, u_b)
    expanded = u_c * EXPANDED_K
    logging.info(f'Computed uncertainty of {n} measurements: u_A={u_a:.6g}, u_B={u_b:.6g}, U={expanded:.6g}')

    return UncertaintyReport(
        count=n,
        mean=xbar,
        std_dev=std_dev,
        u_a=u_a,
        limit_error=spec.limit_error,
        distribution=spec.distribution,
        u_b=u_b,
        u_c=u_c,
        expanded=expanded,
        k=EXPANDED_K,
        values=tuple(values.tolist()))


class UncertaintyEngine:
    ''' A measurement session. Owns one series of measurements; Type B
        inputs are supplied fresh with each calculation.

        Args:
            values: Optional initial measurements
    '''
    def __init__(self, values: Sequence[float] = None):
        self.series = MeasurementSeries(values)

    def __repr__(self):
        return f'<UncertaintyEngine n={self.count()}>'

    def append(self, value: float) -> MeasurementSeries:
        ''' Add one measurement

            Raises:
                InvalidInput: if value is not a finite real number
        '''
        return self.series.append(value)

    def reset(self) -> None:
        ''' Discard all measurements. Reports already computed are unaffected. '''
        self.series.reset()

    def count(self) -> int:
        ''' Number of measurements in the session '''
        return self.series.count

    def compute_report(self, limit_error: float = 0.0, distribution=0) -> UncertaintyReport:
        ''' Compute the uncertainty report for the current measurements

            Args:
                limit_error: Type B limit error. <= 0 means no Type B component.
                distribution: TypeBDistribution, code (0, 1, 2), or name

            Raises:
                InvalidInput: if limit_error is not finite
                InvalidDistribution: if distribution is not recognized
                InsufficientData: if fewer than 2 measurements are stored
        '''
        if self.count() < 2:
            # Checked before the Type B inputs are validated
            raise InsufficientData(f'At least 2 measurements are required, got {self.count()}')
        spec = TypeBSpec(limit_error, distribution)
        return compute_report(self.series, spec)
