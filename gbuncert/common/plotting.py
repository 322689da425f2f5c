''' Common functions for plotting results '''

from contextlib import contextmanager
import numpy as np
import matplotlib.pyplot as plt


# Common plot parameters, usage: "with mpl.style.context(plotstyle):"
plotstyle = {'figure.figsize': (10, 4), 'font.size': 12}


class ReportPlot:
    ''' Context manager for adding figures to report. Ensures figure is closed
        so it doesn't display twice in Jupyter and is properly garbage collected.

        Use via plot_figure() function to chain with plt.style.context.
    '''
    def __enter__(self):
        self._fig = plt.figure()
        return self._fig

    def __exit__(self, exc_type, exc_val, exc_trace):
        plt.close(self._fig)


@contextmanager
def plot_figure():
    ''' Context manager for adding plots to Reports with the defined style.

        Usage:
            with plot_figure() as fig:
                ... # Plot stuff to figure
    '''
    with plt.style.context(plotstyle), ReportPlot() as fig:
        yield fig


def initplot(plot=None):
    ''' Initialize a Figure and Axis to plot on.

        Args:
            plot: plt.Figure, plt.Axis, or None. If None, new figure and
                axis will be created. If Figure or Axis, the Figure AND Axis
                will be returned.

        Returns:
            fig: plt.Figure instance
            ax: plt.Axis instance
    '''
    if plot is None:
        fig = plt.gcf()
        ax = plt.gca()
    elif hasattr(plot, 'gca'):
        fig, ax = plot, plot.gca()
    elif hasattr(plot, 'figure'):
        fig, ax = plot.figure, plot
    else:
        raise ValueError('Undefined plot type')
    return fig, ax


def plot_measurements(values, mean, expanded, ax):
    ''' Plot measurements vs index with the mean and expanded
        uncertainty interval

        Args:
            values (array): Measured values in the order they were entered
            mean (float): Mean of the values
            expanded (float): Expanded uncertainty
            ax (plt.Axis): Axis to plot on
    '''
    x = np.arange(1, len(values)+1)
    ax.plot(x, values, marker='o', ls='', color='C0', label='Measurements')
    ax.axhline(mean, color='C1', label='_mean')
    if expanded > 0:
        ax.fill_between([x.min()-.5, x.max()+.5], mean-expanded, mean+expanded,
                        color='C1', alpha=.2, label='_expanded')
    ax.set_xlabel('Measurement #')
    ax.set_ylabel('Value')


def plot_typeb(dist, limit_error, ax, points=200):
    ''' Plot probability density of the assumed Type B error distribution

        Args:
            dist (TypeBDistribution): Assumed distribution
            limit_error (float): Limit error (half-width)
            ax (plt.Axis): Axis to plot on
            points (int): Number of points to evaluate the PDF
    '''
    frozen = dist.frozen(limit_error)
    if frozen is None:
        ax.text(.5, .5, 'No Type B contribution', ha='center', va='center', transform=ax.transAxes)
        return
    x = np.linspace(-limit_error*1.25, limit_error*1.25, points)
    ax.plot(x, frozen.pdf(x), color='C2', label='Type B distribution')
    ax.axvline(-limit_error, ls='--', color='gray', label='_limit')
    ax.axvline(limit_error, ls='--', color='gray', label='_limit')
    ax.set_xlabel('Error')
    ax.set_ylabel('Probability Density')
    ax.set_title(dist.label)
