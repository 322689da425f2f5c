''' Decorator for attaching a report formatter to a result dataclass

    Usage:

        @reporter.reporter(ReportUncertainty)
        @dataclass(frozen=True)
        class UncertaintyReport:
            ...

    The result then has a `report` property returning the formatter,
    and renders as markdown in Jupyter.
'''


def reporter(reportclass):
    def decorator(resultclass):

        @property
        def report(self):
            return reportclass(self)

        def _repr_markdown_(self):
            return self.report.summary().get_md()

        setattr(resultclass, 'report', report)
        setattr(resultclass, '_repr_markdown_', _repr_markdown_)
        return resultclass
    return decorator
