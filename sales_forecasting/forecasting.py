#////////////////////////////////////////////////////////////////////////////////#
# File:         forecasting.py                                                   #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-04-08                                                       #
# Description:  Encode, train and forecast pipeline.                             #
#////////////////////////////////////////////////////////////////////////////////#

"""
Monthly sales forecasting pipeline: encode -> build -> train -> forecast.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import torch

from sales_forecasting import config
from sales_forecasting.exceptions import EmptyInputError, InvalidTrainingDataError
from sales_forecasting.feature_engineering import encode_sales_records
from sales_forecasting.models.dense import (
    DenseRegressor,
    create_dense_model,
    predict_point,
    train_dense_model
)
from sales_forecasting.utils import set_random_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastPoint:
    """Predicted quantity for one product in one forecast month."""
    product: str
    month: int
    predicted: float


@dataclass(frozen=True)
class ForecastResult:
    """
    Output of a pipeline run.

    Attributes:
        points: Forecast points, months ascending, products in index order
        product_index: Read-only product -> index mapping used for encoding
        history: Read-only training history ('loss' tuple per epoch), empty
            when nothing ran
    """
    points: Tuple[ForecastPoint, ...] = ()
    product_index: Mapping[str, int] = field(default_factory=dict)
    history: Mapping[str, Tuple[float, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # copies are taken so the caller's dicts and lists cannot change the result
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "product_index", MappingProxyType(dict(self.product_index)))
        object.__setattr__(self, "history", MappingProxyType(
            {key: tuple(values) for key, values in self.history.items()}
        ))

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0


def validate_records(records: Optional[Iterable[Any]]) -> List[Any]:
    """
    Materialise the input records, rejecting empty or missing input.

    Raises:
        EmptyInputError: records is None or has no elements
    """
    if records is None:
        raise EmptyInputError("Sales data is undefined")
    records = list(records)
    if not records:
        raise EmptyInputError("Sales data is empty")
    return records


def forecast_products(
    model: DenseRegressor,
    product_index: Dict[str, int],
    horizon: int = config.FORECAST_HORIZON
) -> List[ForecastPoint]:
    """
    Predict every (month, product) combination for months 1..horizon.

    Months are the outer loop and products follow product_index insertion
    order, so grouping the output by product gives months in ascending order.

    Returns:
        List of horizon * len(product_index) forecast points
    """
    points = []
    for month in range(1, horizon + 1):
        for product, product_idx in product_index.items():
            predicted = predict_point(model, month, product_idx)
            points.append(ForecastPoint(product=product, month=month, predicted=predicted))
    return points


def run_forecast_pipeline(
    records: Optional[Iterable[Any]],
    epochs: int = config.DEFAULT_EPOCHS,
    hidden_units: int = config.DEFAULT_HIDDEN_UNITS,
    horizon: int = config.FORECAST_HORIZON,
    learning_rate: float = config.DEFAULT_LEARNING_RATE,
    seed: Optional[int] = None,
    device: Optional[Union[str, torch.device]] = None
) -> ForecastResult:
    """
    Train a fresh regressor on the sales records and forecast each product.

    Args:
        records: Sales records (sales_date, product_description, quantity_sold)
        epochs: Number of full-batch training epochs
        hidden_units: Width of the hidden layer
        horizon: Number of months to forecast, starting at month 1
        learning_rate: Learning rate for Adam
        seed: Optional random seed for reproducible weight initialisation
        device: Torch device for training and inference, defaults to "cpu"

    Returns:
        ForecastResult. Empty input gives an empty result and nothing is trained.

    Raises:
        ValueError: epochs, hidden_units or horizon is not positive
        InvalidTrainingDataError: no record survived encoding
    """
    for name, value in (('epochs', epochs), ('hidden_units', hidden_units), ('horizon', horizon)):
        if value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value}")

    try:
        records = validate_records(records)
    except EmptyInputError as e:
        logger.error(f"{e}; skipping training and forecasting")
        return ForecastResult()

    features, targets, product_index = encode_sales_records(records)

    if len(features) == 0 or len(targets) == 0:
        raise InvalidTrainingDataError(
            f"Invalid input or output data: none of {len(records)} records "
            f"had a valid sales date and product"
        )

    if seed is not None:
        set_random_seed(seed)

    model = create_dense_model(input_dim=config.INPUT_DIM, hidden_units=hidden_units)
    history = train_dense_model(
        model, features, targets,
        epochs=epochs,
        learning_rate=learning_rate,
        device=device
    )

    points = forecast_products(model, product_index, horizon=horizon)
    logger.info(f"Forecast {len(points)} points for {len(product_index)} products "
                f"over {horizon} months")

    return ForecastResult(
        points=tuple(points),
        product_index=product_index,
        history=history
    )
