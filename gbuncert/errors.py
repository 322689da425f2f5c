''' Errors raised by the uncertainty engine

    All errors subclass ValueError so callers that already catch
    ValueError for bad input keep working.
'''


class UncertaintyError(ValueError):
    ''' Base class for uncertainty calculation errors '''


class InsufficientData(UncertaintyError):
    ''' Fewer than two measurements available for a Type A evaluation '''


class InvalidInput(UncertaintyError):
    ''' A measurement or limit error is not a finite real number '''


class InvalidDistribution(UncertaintyError):
    ''' Type B distribution code or name is not one of the supported options '''
