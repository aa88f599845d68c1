#////////////////////////////////////////////////////////////////////////////////#
# File:         feature_engineering.py                                           #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-10                                                       #
# Description:  Feature encoding for monthly sales records.                      #
#////////////////////////////////////////////////////////////////////////////////#

"""
Feature encoding for the monthly sales forecaster.

Turns raw sales records into (month, product index) feature pairs, quantity
targets and a stable product -> index mapping.
"""
import logging
import numbers
import re
import warnings
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

import numpy as np
import pandas as pd

from sales_forecasting import config

logger = logging.getLogger(__name__)

# Longest leading float literal, the way lenient float parsers read "12.5kg"
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")

# mm/dd/yyyy style dates, separators / - or .
_NUMERIC_MONTH_FIRST = re.compile(r"^\s*(\d{1,2})[/.-](\d{1,2})[/.-](\d{2,4})\b")


class EncodedSales(NamedTuple):
    """Encoder output. Unpacks as (features, targets, product_index)."""
    features: List[List[int]]
    targets: List[float]
    product_index: Dict[str, int]


def _get_field(record: Any, name: str) -> Any:
    """read a field from a dict-like record (dict, pandas row) or an object"""
    if hasattr(record, "get"):
        return record.get(name)
    return getattr(record, name, None)


def _is_missing(value: Any) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-likes are not missing scalars
        return False


def extract_month(value: Any) -> Optional[int]:
    """
    Parse a date-like value and return its calendar month (1-12).

    Args:
        value: Date string, date/datetime or pandas Timestamp

    Returns:
        Month number, or None when the value cannot be parsed. Never raises.
    """
    if _is_missing(value):
        return None
    try:
        if isinstance(value, str):
            timestamp = _parse_date_string(value)
        else:
            timestamp = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if timestamp is None or pd.isna(timestamp):
        return None
    return int(timestamp.month)


def _parse_date_string(value: str) -> Optional[pd.Timestamp]:
    """
    Parse a date string as ISO 8601 first, then month-first.

    Numeric dates such as "01/15/2024" are always read month-first; one whose
    leading field is not a valid month ("15/01/2024") does not parse.
    """
    timestamp = pd.to_datetime(value, format="ISO8601", errors="coerce")
    if not pd.isna(timestamp):
        return timestamp

    numeric = _NUMERIC_MONTH_FIRST.match(value)
    if numeric is not None:
        month = int(numeric.group(1))
        if not 1 <= month <= 12:
            return None

    with warnings.catch_warnings():
        # day-first fallback warnings; the month check below rejects those parses
        warnings.simplefilter("ignore", UserWarning)
        timestamp = pd.to_datetime(value, dayfirst=False, errors="coerce")

    if numeric is not None and not pd.isna(timestamp) and timestamp.month != month:
        return None
    return timestamp


def coerce_quantity(value: Any) -> float:
    """
    Parse a quantity as a float, substituting 0.0 for anything unparseable.

    Strings are read up to the end of their leading numeric literal, so
    "12.5 units" gives 12.5. Zero and NaN also come back as 0.0.
    """
    if _is_missing(value) or isinstance(value, bool):
        return 0.0

    if isinstance(value, numbers.Real):
        quantity = float(value)
    else:
        match = _LEADING_FLOAT.match(str(value))
        if match is None:
            return 0.0
        quantity = float(match.group(1).replace("Infinity", "inf"))

    if np.isnan(quantity) or quantity == 0:
        return 0.0
    return quantity


def build_product_index(records: Iterable[Any]) -> Dict[str, int]:
    """
    Map each distinct product description to a zero-based index.

    Indices follow order of first appearance across all records, including
    records that are later dropped for a bad date. Records without a product
    description get no index.
    """
    product_index = {}
    for record in records:
        product = _get_field(record, config.PRODUCT_COL)
        if _is_missing(product):
            continue
        product = str(product)
        if product not in product_index:
            product_index[product] = len(product_index)
    return product_index


def encode_sales_records(records: Optional[Iterable[Any]]) -> EncodedSales:
    """
    Encode sales records into model inputs.

    A record contributes a feature pair [month, product_index] and a target
    only when both its month and its product index are defined. Unparseable
    quantities do not exclude a record; they become 0.0. Surviving records
    keep their input order.

    Args:
        records: Sequence of records with sales_date, product_description
            and quantity_sold fields

    Returns:
        EncodedSales(features, targets, product_index). Empty input gives
        empty lists and an empty index.
    """
    records = list(records) if records is not None else []
    if not records:
        logger.error("Sales data is empty or undefined")
        return EncodedSales([], [], {})

    product_index = build_product_index(records)

    features = []
    targets = []
    bad_dates = 0
    for record in records:
        month = extract_month(_get_field(record, config.SALES_DATE_COL))
        product = _get_field(record, config.PRODUCT_COL)
        product_idx = None if _is_missing(product) else product_index.get(str(product))

        if month is None:
            bad_dates += 1
            continue
        if product_idx is None:
            continue

        # features and targets are appended together so they stay aligned
        features.append([month, product_idx])
        targets.append(coerce_quantity(_get_field(record, config.QUANTITY_COL)))

    dropped = len(records) - len(features)
    logger.info(f"Encoded {len(features)} of {len(records)} sales records "
                f"({len(product_index)} products, {dropped} dropped)")
    if bad_dates:
        logger.debug(f"{bad_dates} records had unparseable sales dates")

    return EncodedSales(features, targets, product_index)
