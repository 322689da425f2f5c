''' Calculation setup loaded from a YAML file

    Example setup file:

        - mode: uncertainty
          name: gauge block
          measurements: [10.00, 10.02, 9.98, 10.01, 9.99]
          limit_error: 0.05
          distribution: uniform
          decimals: 6
'''

import logging

import yaml

from .errors import InvalidInput
from .series import parse_measurement, parse_decimals
from .distributions import get_distribution, TypeBDistribution
from .uncertainty import UncertaintyEngine


class ProjectUncertainty:
    ''' An uncertainty calculation: a measurement session plus the
        Type B inputs and report options.

        Args:
            engine: UncertaintyEngine holding the measurements
            name: Name of the calculation
    '''
    def __init__(self, engine=None, name=''):
        self.name = name
        self.description = ''
        self.engine = UncertaintyEngine() if engine is None else engine
        self.limit_error = 0.0
        self.distribution = TypeBDistribution.UNIFORM
        self.decimals = 6
        self._result = None

    @property
    def result(self):
        ''' Calculation result '''
        if self._result is None:
            self.calculate()
        return self._result

    def calculate(self):
        ''' Run calculation '''
        self._result = self.engine.compute_report(self.limit_error, self.distribution)
        return self._result

    def report_short(self):
        ''' Plain text report '''
        return self.result.report.text(decimals=self.decimals)

    def report_summary(self, **kwargs):
        ''' Summary table report '''
        kwargs.setdefault('decimals', self.decimals)
        kwargs.setdefault('name', self.name)
        kwargs.setdefault('description', self.description)
        return self.result.report.summary(**kwargs)

    def report_all(self, **kwargs):
        ''' Full report with measurements, equations, and plots '''
        kwargs.setdefault('decimals', self.decimals)
        kwargs.setdefault('name', self.name)
        kwargs.setdefault('description', self.description)
        return self.result.report.all(**kwargs)

    def load_config(self, config):
        ''' Load configuration dictionary. Every entry is validated before
            the project is changed.
        '''
        mode = config.get('mode', 'uncertainty')
        if mode != 'uncertainty':
            raise InvalidInput(f'Unsupported setup mode "{mode}"')

        measurements = config.get('measurements', [])
        if not isinstance(measurements, (list, tuple)):
            raise InvalidInput(f'Setup "measurements" must be a list of values, got {measurements!r}')
        values = [parse_measurement(value) for value in measurements]
        limit_error = parse_measurement(config.get('limit_error', 0.0), 'Limit error')
        distribution = get_distribution(config.get('distribution', 0))
        decimals = parse_decimals(config.get('decimals', 6))

        self.name = str(config.get('name', self.name))
        self.description = str(config.get('description', config.get('desc', '')))
        self.engine.reset()
        self.engine.series.extend(values)
        self.limit_error = limit_error
        self.distribution = distribution
        self.decimals = decimals
        self._result = None
        logging.info(f'Loaded setup "{self.name}" with {self.engine.count()} measurements')

    @classmethod
    def from_config(cls, config):
        ''' Create new project component from the config dictionary '''
        proj = cls()
        proj.load_config(config)
        return proj

    @classmethod
    def from_configfile(cls, fname):
        ''' Read and parse a YAML setup file.

            Args:
                fname: File name or open file object to read

            Returns:
                New ProjectUncertainty instance

            Raises:
                InvalidInput: if the file is not a readable YAML setup
        '''
        try:
            yml = fname.read()  # fname is file object
        except AttributeError:
            with open(fname, 'r', encoding='utf-8') as fobj:  # fname is string
                yml = fobj.read()

        try:
            config = yaml.safe_load(yml)
        except yaml.YAMLError as err:
            raise InvalidInput(f'Setup file is not valid YAML: {err}') from err

        if isinstance(config, list):
            # Setup files may hold a list of calculations. Only the first is used.
            config = config[0] if config else {}
        if not isinstance(config, dict):
            raise InvalidInput('Setup file must contain a mapping of setup keys')

        return cls.from_config(config)
