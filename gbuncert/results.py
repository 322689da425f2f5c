''' Result of an uncertainty calculation '''

from dataclasses import dataclass

from .common import reporter
from .distributions import TypeBDistribution
from .report.uncertainty import ReportUncertainty


@reporter.reporter(ReportUncertainty)
@dataclass(frozen=True)
class UncertaintyReport:
    ''' Combined Type A and Type B uncertainty of a measurement series.
        A snapshot; it holds no reference to the series it came from.

        Attributes:
            count: Number of measurements
            mean: Arithmetic mean of the measurements
            std_dev: Experimental (sample) standard deviation
            u_a: Type A standard uncertainty of the mean
            limit_error: Type B limit error
            distribution: Assumed Type B distribution
            u_b: Type B standard uncertainty
            u_c: Combined standard uncertainty
            expanded: Expanded uncertainty, k * u_c
            k: Coverage factor of the expanded uncertainty
            values: Copy of the measurements used in the calculation
    '''
    count: int
    mean: float
    std_dev: float
    u_a: float
    limit_error: float
    distribution: TypeBDistribution
    u_b: float
    u_c: float
    expanded: float
    k: float = 2
    values: tuple = ()

    @property
    def interval(self) -> tuple[float, float]:
        ''' Expanded uncertainty interval (mean - U, mean + U) '''
        return self.mean - self.expanded, self.mean + self.expanded

    def statement(self, decimals: int = 6) -> str:
        ''' Measurement result as "mean ± U" with fixed decimals '''
        return f'{self.mean:.{decimals}f} ± {self.expanded:.{decimals}f}'
