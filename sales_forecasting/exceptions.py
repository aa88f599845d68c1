#////////////////////////////////////////////////////////////////////////////////#
# File:         exceptions.py                                                    #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-07                                                       #
# Description:  Error types raised by the forecasting pipeline.                  #
#////////////////////////////////////////////////////////////////////////////////#

"""
Exceptions raised by the sales forecasting pipeline.
"""


class ForecastingError(Exception):
    """Base class for pipeline errors."""


class EmptyInputError(ForecastingError, ValueError):
    """
    No sales records were supplied.

    The pipeline reports this and returns an empty result instead of failing.
    """


class InvalidTrainingDataError(ForecastingError, ValueError):
    """
    Encoding left nothing to train on (empty features or targets, or a
    length mismatch between them).
    """


class TrainingError(ForecastingError, RuntimeError):
    """Training produced a non-finite loss."""
