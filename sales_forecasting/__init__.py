#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-05                                                       #
# Description:  Package initialization for sales forecasting project.            #
#////////////////////////////////////////////////////////////////////////////////#

"""
Monthly sales forecasting package.

This package trains a small dense regressor on raw sales records and forecasts
monthly quantity sold per product.
"""
