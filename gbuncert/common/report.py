''' Markdown report formatting and rendering

    A Report is built from text plus tagged Number, Math, and Plot objects.
    The tags are resolved when the report is rendered, so the same report
    can be written as markdown with latex math and SVG figures, as HTML,
    or as plain text with text plots.
'''

import re
import base64
from io import BytesIO
from collections import ChainMap
import numpy as np
import sympy
import markdown
import matplotlib.pyplot as plt

from .style import css


default_decimals = 6

_TAG = re.compile(r'\[\[(VAL|EQN|PLT)(\d+)\]\]')


class Number:
    ''' A numeric value for use in a report, printed with a fixed number
        of decimal places.

        Args:
            value (float): The value to report
            decimals (int): Number of decimal places. Overrides the
                decimals given when the report is rendered.
    '''
    def __init__(self, value, **kwargs):
        self.value = value
        self.kwargs = kwargs

    def string(self, **kwargs):
        ''' Get string representation of the number '''
        decimals = ChainMap(self.kwargs, kwargs).get('decimals', default_decimals)
        if self.value is None:
            return 'nan'
        if not np.isfinite(self.value):
            return format(self.value)   # 'nan' or 'inf'
        return f'{self.value:.{decimals}f}'


class Math:
    ''' A formatted mathematical expression for use in a report.
        Use `from_sympy` to create one.
    '''
    def __init__(self, latexexpr='', prettytextexpr='', simpletextexpr=''):
        self.latexexpr = latexexpr
        self.prettytextexpr = prettytextexpr
        self.simpletextexpr = simpletextexpr

    @classmethod
    def from_sympy(cls, expr):
        ''' Create Math object from a sympy object. '''
        return cls(sympy.latex(expr), sympy.pretty(expr), str(expr))

    def latex(self, enclose=('$', '$')):
        ''' Math as latex string wrapped in the enclose delimiters '''
        return enclose[0] + self.latexexpr + enclose[1] if self.latexexpr else ''

    def prettytext(self):
        ''' Math as pretty-printed plain text. May contain unicode characters '''
        return self.prettytextexpr

    def simpletext(self):
        ''' Math as ascii text '''
        return self.simpletextexpr


class Plot:
    ''' A matplotlib figure for use in a report. The figure is closed when
        the Plot is garbage collected.
    '''
    def __init__(self, fig):
        self.fig = fig

    def __del__(self):
        plt.close(self.fig)

    def _b64(self, fmt, **kwargs):
        buf = BytesIO()
        self.fig.savefig(buf, format=fmt, **kwargs)
        data = buf.getvalue()
        if fmt == 'svg':
            data = data[data.find(b'<svg'):]  # Strip XML header
            mime = 'svg+xml'
        else:
            mime = fmt
        return f'data:image/{mime};base64,{base64.b64encode(data).decode("utf-8")}'

    def png_b64(self, dpi=120):
        ''' Render to base-64 encoded PNG data uri '''
        return self._b64('png', dpi=dpi)

    def svg_b64(self):
        ''' Render to base-64 encoded SVG data uri '''
        return self._b64('svg', bbox_inches='tight')

    def textplot(self, char='.', H=18, W=55):
        ''' Plot the labeled lines of the figure as plain text.

            Args:
                char (string): Character to print for each data point
                H (int): Character height of plot
                W (int): Character width of plot
        '''
        allplotstrs = []
        for ax in self.fig.axes:
            for line in ax.lines:
                label = line.get_label()
                if label.startswith('_'):
                    continue   # Reference lines, such as the mean
                x, y = line.get_data()
                plotstr = textplot(x, y, W=W, H=H, char=char)
                allplotstrs.append(f'{label:^{W+8}}\n{plotstr}')
        return '\n\n\n'.join(allplotstrs) + '\n\n'


def textplot(xvals, yvals, W=55, H=18, char='.'):
    ''' Plot x, y data in plain-text string format as scatter plot

        Args:
            xvals, yvals (arrays): Arrays of x, y data to plot
            char (string): Character to print for each data point
            H (int): Character height of plot
            W (int): Character width of plot
    '''
    xvals = np.asarray(xvals, dtype=float)
    yvals = np.asarray(yvals, dtype=float)

    keep = np.isfinite(yvals) & np.isfinite(xvals)
    xvals, yvals = xvals[keep], yvals[keep]
    if len(xvals) == 0:
        return ''

    def scale(vals, size):
        lo, hi = vals.min(), vals.max()
        if lo == hi:
            return np.full(len(vals), size//2, dtype=int), lo, hi
        return ((vals-lo)/(hi-lo) * (size-1)).astype(int), lo, hi

    xnorm, xmin, xmax = scale(xvals, W)
    ynorm, ymin, ymax = scale(yvals, H)

    grid = np.full((H, W), ' ')
    grid[ynorm, xnorm] = char

    margin = 7
    ylabels = {0: ymax, H//2: (ymax+ymin)/2, H-1: ymin}
    lines = []
    for h, row in enumerate(grid[::-1]):
        prefix = f'{ylabels[h]:.4g}'.rjust(margin)[:margin] if h in ylabels else ' ' * margin
        lines.append(prefix + '|' + ''.join(row))

    lines.append(' ' * margin + '-'*W)
    lines.append(' ' * (margin + 1) + f'{xmin:.4g}'.ljust(W//2 - 3)
                 + f'{(xmin+xmax)/2:.4g}'.ljust(W//2 - 3) + f'{xmax:.4g}')
    return '\n'.join(lines)


class Report:
    ''' A Report consisting of text, plots, math equations, and values for
        formatting in different formats.

        Args:
            mathfmt (string): Format for math expressions - latex, text (pretty), or ascii.
            mathdelim (tuple): Delimiter/escape characters for math expressions, typically ('$', '$').
            figfmt (string): Format for matplotlib figures - svg, png, or text
            pngdpi (int): Dots per inch for PNG images
            decimals (int): Decimal places for numbers
    '''
    def __init__(self, **kwargs):
        self._s = ''
        self._objs = {'VAL': [], 'EQN': [], 'PLT': []}
        self.kwargs = kwargs

    def hdr(self, text, level=1):
        ''' Add a header to the report

            Args:
                text (string): Text of the header
                level (int): Header level. 1 is top level (# HEADER) in markdown.
        '''
        self._s += f'{"#"*level} {text}\n\n'

    def txt(self, text):
        ''' Add text to the report '''
        self._s += text

    def newline(self):
        ''' Add a line break '''
        self._s += '\n\n'

    def sympy(self, sympyexpr, end=''):
        ''' Add a sympy expression to the report '''
        self._s += self._insert_obj(Math.from_sympy(sympyexpr), end=end)

    def plot(self, fig, end='\n\n'):
        ''' Add matplotlib figure to the report '''
        self._s += self._insert_obj(Plot(fig), end=end)

    def num(self, value, end='', **kwargs):
        ''' Add a Number to the report. kwargs are passed to Number. '''
        self._s += self._insert_obj(Number(value, **kwargs), end=end)

    def _insert_obj(self, obj, end=''):
        ''' Store a Number, Math, or Plot and return its tag. Anything else is text. '''
        for kind, cls in (('VAL', Number), ('EQN', Math), ('PLT', Plot)):
            if isinstance(obj, cls):
                self._objs[kind].append(obj)
                return f'[[{kind}{len(self._objs[kind])-1}]]{end}'
        return f'{obj}{end}'

    def table(self, rows, hdr):
        ''' Add a markdown table to the report

            Args:
                rows (list): List of lists for each row. Each item may be a
                    string or Number.
                hdr (list): List of column headers
        '''
        lines = ['| ' + ' | '.join(self._insert_obj(c) for c in row) + ' |' for row in [hdr] + list(rows)]
        lines.insert(1, '|' + '|'.join('----------' for _ in hdr) + '|')
        self._s += '\n' + '\n'.join(lines) + '\n\n\n'

    def add(self, *args, end='\n'):
        ''' Add multiple items to the report

            Args:
                args (objects): Each arg may be a string, Number, Math, or Plot
                end (str): String to append after each object
        '''
        for arg in args:
            self._s += self._insert_obj(arg, end=end)

    def append(self, report, end=''):
        ''' Append another report onto this one, renumbering its tags '''
        offsets = {kind: len(objs) for kind, objs in self._objs.items()}
        self._s += _TAG.sub(lambda m: f'[[{m.group(1)}{int(m.group(2)) + offsets[m.group(1)]}]]', report._s)
        self._s += end
        for kind, objs in report._objs.items():
            self._objs[kind].extend(objs)

    def get_md(self, **kwargs):
        ''' Get the report in markdown format.

            Args:
                **kwargs: See Report class. Arguments specified at Report
                instantiation override arguments given here.
        '''
        kargs = ChainMap(self.kwargs, kwargs)
        mathfmt = kargs.get('mathfmt', 'latex')   # latex, text, ascii
        mathdelim = kargs.get('mathdelim', ('$', '$'))
        figfmt = kargs.get('figfmt', 'svg')       # svg, png, text
        pngdpi = kargs.get('pngdpi', 120)
        footer = []

        def render(match):
            obj = self._objs[match.group(1)][int(match.group(2))]
            if isinstance(obj, Number):
                return obj.string(**kargs)
            if isinstance(obj, Math):
                if mathfmt == 'latex':
                    return obj.latex(enclose=mathdelim)
                return obj.simpletext() if mathfmt == 'ascii' else obj.prettytext()
            if figfmt in ['text', 'txt']:
                return obj.textplot(char='o')
            uri = obj.svg_b64() if figfmt == 'svg' else obj.png_b64(dpi=pngdpi)
            footer.append(f'[IMG{len(footer)}]: {uri}')
            return f'![IMG{len(footer)-1}][]\n\n'

        s = _TAG.sub(render, self._s)
        if footer:
            s += '\n\n' + '\n'.join(footer)
        return s.strip()

    def get_html(self, **kwargs):
        ''' Get report in HTML format, including CSS. Non-ascii characters
            are written as character references.
        '''
        html = markdown.markdown(self.get_md(**kwargs), extensions=['markdown.extensions.tables'])
        html = html.encode('ascii', 'xmlcharrefreplace').decode('utf-8')
        return f'<style type="text/css">{css.css}</style>\n{html}'

    def save_html(self, fname, **kwargs):
        ''' Save the HTML report, adding a .html extension if missing '''
        if not fname.lower().endswith(('.html', '.htm')):
            fname += '.html'
        with open(fname, 'w', encoding='utf-8') as f:
            f.write(self.get_html(**kwargs))
