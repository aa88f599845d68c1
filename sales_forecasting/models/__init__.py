#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-05                                                       #
# Description:  Models package initialization.                                   #
#////////////////////////////////////////////////////////////////////////////////#

"""
Models package for sales forecasting.

Exports the dense regressor and its training/prediction helpers.
"""

from .dense import (
    DenseRegressor,
    create_dense_model,
    to_training_tensors,
    train_dense_model,
    predict_point
)

__all__ = [
    'DenseRegressor',
    'create_dense_model',
    'to_training_tensors',
    'train_dense_model',
    'predict_point'
]
