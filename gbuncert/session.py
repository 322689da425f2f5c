''' Line-oriented measurement session

    A plain text front end to UncertaintyEngine. Each line is one command:

        10.02           add a measurement (same as "add 10.02")
        list            show the measurements with 1-based indices
        count           number of measurements
        limit 0.05      set the Type B limit error
        dist normal95   set the Type B distribution (uniform, normal95, normal99 or 0, 1, 2)
        calc            compute and show the uncertainty report
        clear           discard measurements and reset the Type B inputs
        help            show this help
        quit            end the session
'''

import textwrap

from .errors import UncertaintyError, InvalidInput
from .series import parse_measurement, parse_measurements, parse_decimals
from .distributions import TypeBDistribution, get_distribution
from .uncertainty import UncertaintyEngine

HELP = textwrap.dedent(__doc__.split("\n\n", 1)[1]).strip()


class Session:
    ''' Interactive measurement session

        Args:
            limit_error: Initial Type B limit error
            distribution: Initial Type B distribution
            decimals: Decimal places in the report
    '''
    def __init__(self, limit_error=0.0, distribution=TypeBDistribution.UNIFORM, decimals=6):
        self.engine = UncertaintyEngine()
        self.limit_error = parse_measurement(limit_error, 'Limit error')
        self.distribution = get_distribution(distribution)
        self.decimals = parse_decimals(decimals)
        self.done = False
        self.last = None   # Most recent UncertaintyReport

    def execute(self, line: str) -> str:
        ''' Run one command line and return the text to show.
            Errors are returned as messages, the session stays usable.
        '''
        cmd, _, arg = line.strip().partition(' ')
        arg = arg.strip()
        cmd = cmd.lower()
        if not cmd:
            return ''
        try:
            return self._dispatch(cmd, arg, line)
        except UncertaintyError as err:
            return f'Error: {err}'

    def _dispatch(self, cmd, arg, line):
        if cmd in ('quit', 'exit', 'q'):
            self.done = True
            return ''

        if cmd in ('help', '?'):
            return HELP

        if cmd == 'add':
            for value in parse_measurements(arg) if arg else [parse_measurement(arg)]:
                self.engine.append(value)
            return f'{self.engine.count()} measurements'

        if cmd == 'list':
            entries = self.engine.series.entries()
            if not entries:
                return 'No measurements'
            return '\n'.join(f'{i:>4d}  {v:.{self.decimals}f}' for i, v in entries)

        if cmd == 'count':
            return str(self.engine.count())

        if cmd == 'limit':
            self.limit_error = parse_measurement(arg, 'Limit error')
            return f'Limit error: {self.limit_error:.{self.decimals}f}'

        if cmd == 'dist':
            self.distribution = get_distribution(arg)
            return f'Distribution: {self.distribution.label}'

        if cmd == 'calc':
            self.last = self.engine.compute_report(self.limit_error, self.distribution)
            return self.last.report.text(decimals=self.decimals)

        if cmd == 'clear':
            self.engine.reset()
            self.limit_error = 0.0
            self.distribution = TypeBDistribution.UNIFORM
            return 'Cleared'

        # Anything else must be a measurement
        try:
            value = parse_measurement(line)
        except InvalidInput:
            raise InvalidInput(f'Unknown command "{line.strip()}". Type "help" for commands.') from None
        self.engine.append(value)
        return f'{self.engine.count()} measurements'
