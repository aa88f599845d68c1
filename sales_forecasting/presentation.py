#////////////////////////////////////////////////////////////////////////////////#
# File:         presentation.py                                                  #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-04-10                                                       #
# Description:  Chart series and table layouts for forecasts.                    #
#////////////////////////////////////////////////////////////////////////////////#

"""
Reshape forecast points into chart series and tables.

Only the data layout is produced here; drawing and styling are left to the
charting front end.
"""
from typing import Any, Dict, Iterable, List

import pandas as pd

from sales_forecasting import config


def month_labels(horizon: int = config.FORECAST_HORIZON) -> List[str]:
    """ordinal month labels: Month 1 .. Month horizon"""
    return [config.MONTH_LABEL_TEMPLATE.format(month) for month in range(1, horizon + 1)]


def group_forecast_by_product(points: Iterable[Any]) -> Dict[str, List[float]]:
    """
    Group predictions by product, keeping first-occurrence order of products
    and the order of points within each product.
    """
    series = {}
    for point in points:
        series.setdefault(point.product, []).append(point.predicted)
    return series


def build_chart_data(points: Iterable[Any], horizon: int = config.FORECAST_HORIZON) -> Dict[str, Any]:
    """
    Build a line chart payload with one dataset per product.

    Returns:
        {"labels": ["Month 1", ...], "datasets": [{"label": product, "data": [...]}, ...]}
    """
    series = group_forecast_by_product(points)
    datasets = [
        {"label": product, "data": predictions}
        for product, predictions in series.items()
    ]
    return {"labels": month_labels(horizon), "datasets": datasets}


def forecast_to_frame(points: Iterable[Any]) -> pd.DataFrame:
    """tabular view of forecast points (product, month, predicted)"""
    rows = [
        {"product": p.product, "month": p.month, "predicted": p.predicted}
        for p in points
    ]
    return pd.DataFrame(rows, columns=["product", "month", "predicted"])
