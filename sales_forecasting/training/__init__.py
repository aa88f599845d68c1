#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-05                                                       #
# Description:  Training package initialization.                                 #
#////////////////////////////////////////////////////////////////////////////////#

"""
Command line scripts for the sales forecaster.

- forecast_sales.py: train on a sales CSV and write the product forecast
"""
