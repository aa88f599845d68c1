#////////////////////////////////////////////////////////////////////////////////#
# File:         data_loader.py                                                   #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-12                                                       #
# Description:  Data loading functions for raw sales records.                    #
#////////////////////////////////////////////////////////////////////////////////#

"""
Data loading functions for raw sales records.
"""
import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

import sales_forecasting.config as config

logger = logging.getLogger(__name__)


def records_from_dataframe(df: pd.DataFrame) -> List[Dict[str, str]]:
    """
    Convert a sales DataFrame into a list of record dicts in row order.

    Only the required columns are kept; values are passed through untouched
    so that parsing stays with the feature encoder.
    """
    missing_cols = [col for col in config.REQUIRED_COLUMNS if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns: {missing_cols}")

    return df[config.REQUIRED_COLUMNS].to_dict(orient="records")


def load_sales_records(file_path: Union[str, Path]) -> List[Dict[str, str]]:
    """
    Load sales records from a CSV file.

    Every column is read as a string and empty cells stay empty strings, so
    bad dates and quantities reach the encoder as they appear in the file.

    Args:
        file_path: Path to a CSV with sales_date, product_description and
            quantity_sold columns

    Returns:
        List of record dicts in file order
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Sales file not found: {file_path}")

    logger.info(f"Loading sales records from {file_path}")
    try:
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise ValueError(f"Empty file: {file_path}")

    records = records_from_dataframe(df)
    logger.info(f"Loaded {len(records)} sales records")
    return records
