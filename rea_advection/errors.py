"""
exceptions raised by the solver
"""


class REAError(Exception):
    """
    base class of every error raised by rea_advection
    """


class ConfigurationError(REAError, ValueError):
    """
    invalid simulation parameters or scheme selection, raised before time stepping
    """


class IntegrationError(REAError, ArithmeticError):
    """
    adaptive quadrature of the initial profile did not converge for a cell
    """


class DimensionError(REAError, ValueError):
    """
    shape mismatch between arrays passed between components
    """
