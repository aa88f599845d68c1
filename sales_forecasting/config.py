#////////////////////////////////////////////////////////////////////////////////#
# File:         config.py                                                        #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-05                                                       #
# Description:  Configuration settings for sales forecasting project.            #
#////////////////////////////////////////////////////////////////////////////////#

"""
Configuration settings for the sales forecasting project.
"""
import os
from pathlib import Path

# Project directory structure
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
FORECASTS_DIR = PROJECT_ROOT / "forecasts"

# Sales record fields
SALES_DATE_COL = "sales_date"
PRODUCT_COL = "product_description"
QUANTITY_COL = "quantity_sold"
REQUIRED_COLUMNS = [SALES_DATE_COL, PRODUCT_COL, QUANTITY_COL]

# Forecast settings
FORECAST_HORIZON = 6  # Months ahead, always starting at month 1
MONTH_LABEL_TEMPLATE = "Month {}"

# Model settings
INPUT_DIM = 2  # (month, product index)
DEFAULT_HIDDEN_UNITS = 10
OUTPUT_DIM = 1

# Training settings
RANDOM_SEED = 42
DEFAULT_EPOCHS = 50
DEFAULT_LEARNING_RATE = 0.001  # Adam default

# Output file names
OUTPUT_CONFIG = {
    "forecast_file_name": "forecast.csv",
    "chart_file_name": "chart_data.json",
    "info_file_name": "forecast_info.json",
    "log_file_name": "sales_forecast.log"
}

LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S"
}
