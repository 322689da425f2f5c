'''
gbuncert - Type A / Type B measurement uncertainty calculator

Combines the statistical (Type A) uncertainty of repeated measurements with
a Type B uncertainty derived from a limit error and an assumed distribution,
following the GB/T 27411-2012 procedure.
'''

from .version import __version__, __date__

from .errors import UncertaintyError, InsufficientData, InvalidInput, InvalidDistribution
from .series import MeasurementSeries, parse_measurement, parse_measurements
from .distributions import TypeBDistribution, TypeBSpec, get_distribution
from .results import UncertaintyReport
from .uncertainty import UncertaintyEngine, compute_report

__all__ = ['__version__', '__date__', 'UncertaintyError', 'InsufficientData', 'InvalidInput',
           'InvalidDistribution', 'MeasurementSeries', 'parse_measurement', 'parse_measurements',
           'TypeBDistribution', 'TypeBSpec', 'get_distribution', 'UncertaintyReport',
           'UncertaintyEngine', 'compute_report']
