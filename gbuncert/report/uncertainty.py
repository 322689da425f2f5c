''' Reports for Type A / Type B uncertainty results '''

import sympy

from ..common import report, plotting


# Model equations shown in the full report
_s, _n, _a, _k, _ua, _ub, _uc = sympy.symbols('s n a k u_A u_B u_c')
FORMULAS = [
    sympy.Eq(_ua, _s/sympy.sqrt(_n)),
    sympy.Eq(_ub, _a/_k),
    sympy.Eq(_uc, sympy.sqrt(_ua**2 + _ub**2)),
    sympy.Eq(sympy.Symbol('U'), 2*_uc),
]


class ReportUncertainty:
    ''' Report an UncertaintyReport result

        Args:
            result: UncertaintyReport instance
    '''
    def __init__(self, result):
        self.result = result

    def text(self, decimals=6):
        ''' Plain text report with every number to a fixed number of decimals '''
        r = self.result
        f = f'.{decimals}f'
        lines = [
            'Measurement statistics (GB/T 27411-2012)',
            '----------------------------------------',
            f'Number of measurements: {r.count}',
            f'Mean: {r.mean:{f}}',
            f'Experimental standard deviation: {r.std_dev:{f}}',
            '',
            '[Type A uncertainty]',
            f'Standard uncertainty of the mean: {r.u_a:{f}} (u_A)',
            '',
            '[Type B uncertainty]',
            f'Limit error: {r.limit_error:{f}}',
            f'Distribution: {r.distribution.label}',
            f'Standard uncertainty: {r.u_b:{f}} (u_B)',
            '',
            '[Combined and expanded uncertainty]',
            f'Combined standard uncertainty: {r.u_c:{f}} (u_c)',
            f'Expanded uncertainty (k={r.k:g}, 95% confidence): {r.expanded:{f}}',
            f'Measurement result: {r.statement(decimals)}',
        ]
        return '\n'.join(lines)

    def summary(self, name='', description='', **kwargs):
        ''' Table of the uncertainty components and the measurement result

            Args:
                name (str): Name of the calculation, shown under the header
                description (str): Description of the calculation
                **kwargs: passed to report.Report
        '''
        r = self.result
        decimals = kwargs.get('decimals', report.default_decimals)

        def num(value):
            return report.Number(value, decimals=decimals)

        rows = [['Number of measurements', str(r.count)],
                ['Mean', num(r.mean)],
                ['Experimental standard deviation', num(r.std_dev)],
                ['Type A standard uncertainty (u_A)', num(r.u_a)],
                ['Limit error', num(r.limit_error)],
                ['Distribution', r.distribution.label],
                ['Type B standard uncertainty (u_B)', num(r.u_b)],
                ['Combined standard uncertainty (u_c)', num(r.u_c)],
                [f'Expanded uncertainty (k={r.k:g}, 95%)', num(r.expanded)]]
        rpt = report.Report(**kwargs)
        rpt.hdr('Measurement Uncertainty (GB/T 27411-2012)', level=2)
        if name:
            rpt.txt(f'Calculation: {name}\n\n')
        if description:
            rpt.txt(f'{description}\n\n')
        rpt.table(rows, hdr=['Parameter', 'Value'])
        rpt.add('Measurement result: ', r.statement(decimals), end='')
        rpt.newline()
        return rpt

    def measurements(self, **kwargs):
        ''' Table of measured values with 1-based index '''
        rpt = report.Report(**kwargs)
        rpt.hdr('Measurements', level=3)
        rows = [[str(i+1), report.Number(v)] for i, v in enumerate(self.result.values)]
        if rows:
            rpt.table(rows, hdr=['#', 'Value'])
        else:
            rpt.txt('No measurements\n\n')
        return rpt

    def formulas(self, **kwargs):
        ''' Model equations of the calculation '''
        rpt = report.Report(**kwargs)
        rpt.hdr('Method', level=3)
        for eqn in FORMULAS:
            rpt.sympy(eqn, end='\n\n')
        rpt.add(f'Type B coverage factor for {self.result.distribution.label}: ',
                report.Number(self.result.distribution.k, decimals=4), end='')
        rpt.newline()
        return rpt

    def plot(self, fig=None):
        ''' Plot measurements with the mean and expanded uncertainty band
            next to the assumed Type B distribution.

            Args:
                fig: Matplotlib figure to plot on. Current figure is used if None.
        '''
        fig, _ = plotting.initplot(fig)
        fig.clf()
        ax1 = fig.add_subplot(1, 2, 1)
        ax2 = fig.add_subplot(1, 2, 2)
        r = self.result
        plotting.plot_measurements(r.values, r.mean, r.expanded, ax=ax1)
        plotting.plot_typeb(r.distribution, r.limit_error, ax=ax2)
        fig.tight_layout()
        return fig

    def all(self, name='', description='', **kwargs):
        ''' Summary, measurement table, equations, and plots '''
        rpt = self.summary(name=name, description=description, **kwargs)
        rpt.append(self.measurements(**kwargs))
        rpt.append(self.formulas(**kwargs))
        with plotting.plot_figure() as fig:
            self.plot(fig)
            rpt.plot(fig)
        return rpt
