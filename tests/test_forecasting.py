import dataclasses

import pytest
import torch

from sales_forecasting import forecasting
from sales_forecasting.exceptions import EmptyInputError, InvalidTrainingDataError
from sales_forecasting.forecasting import (
    ForecastPoint,
    ForecastResult,
    forecast_products,
    run_forecast_pipeline,
    validate_records,
)
from sales_forecasting.models.dense import create_dense_model
from sales_forecasting.presentation import group_forecast_by_product


@pytest.fixture
def product_index():
    return {"Widget": 0, "Gadget": 1, "Gizmo": 2}


def test_forecast_shape(product_index):
    torch.manual_seed(0)
    points = forecast_products(create_dense_model(), product_index)

    assert len(points) == 18
    assert {p.month for p in points} == {1, 2, 3, 4, 5, 6}
    assert {p.product for p in points} == set(product_index)
    assert all(isinstance(p.predicted, float) for p in points)


def test_forecast_order_months_outer_products_inner(product_index):
    points = forecast_products(create_dense_model(), product_index)

    expected = [(m, prod) for m in range(1, 7) for prod in product_index]
    assert [(p.month, p.product) for p in points] == expected


def test_grouping_reconstructs_ascending_months(product_index):
    points = forecast_products(create_dense_model(), product_index)

    months_by_product = {}
    for p in points:
        months_by_product.setdefault(p.product, []).append(p.month)

    assert list(months_by_product) == list(product_index)
    assert all(months == [1, 2, 3, 4, 5, 6] for months in months_by_product.values())
    assert list(group_forecast_by_product(points)) == list(product_index)


def test_forecast_uses_model_output(product_index):
    model = create_dense_model()
    points = forecast_products(model, product_index, horizon=2)

    with torch.no_grad():
        expected = model(torch.tensor([[2.0, 1.0]])).item()
    gadget_month_2 = [p for p in points if p.product == "Gadget" and p.month == 2][0]
    assert gadget_month_2.predicted == pytest.approx(expected)


def test_custom_horizon(product_index):
    points = forecast_products(create_dense_model(), product_index, horizon=3)
    assert len(points) == 9
    assert max(p.month for p in points) == 3


def test_forecast_point_is_immutable():
    point = ForecastPoint(product="A", month=1, predicted=1.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.predicted = 2.0


@pytest.mark.parametrize("records", [None, []])
def test_validate_records_rejects_empty(records):
    with pytest.raises(EmptyInputError):
        validate_records(records)


@pytest.mark.parametrize("records", [None, []])
def test_empty_input_short_circuits(records, monkeypatch):
    calls = []
    monkeypatch.setattr(forecasting, "create_dense_model", lambda *a, **k: calls.append("build"))
    monkeypatch.setattr(forecasting, "train_dense_model", lambda *a, **k: calls.append("train"))
    monkeypatch.setattr(forecasting, "predict_point", lambda *a, **k: calls.append("predict"))

    result = run_forecast_pipeline(records)

    assert isinstance(result, ForecastResult)
    assert result.is_empty
    assert result.product_index == {}
    assert calls == []


def test_no_valid_records_raises_before_training(monkeypatch):
    calls = []
    monkeypatch.setattr(forecasting, "train_dense_model", lambda *a, **k: calls.append("train"))
    records = [
        {"sales_date": "bad-date", "product_description": "A", "quantity_sold": "1"},
        {"sales_date": "bad-date", "product_description": "B", "quantity_sold": "2"},
    ]

    with pytest.raises(InvalidTrainingDataError):
        run_forecast_pipeline(records)
    assert calls == []


def test_pipeline_end_to_end(sales_records):
    result = run_forecast_pipeline(sales_records, epochs=5, seed=7)

    assert result.product_index == {"Widget": 0, "Gadget": 1, "Gizmo": 2}
    assert len(result.points) == 18
    assert isinstance(result.points, tuple)
    assert len(result.history["loss"]) == 5


def test_pipeline_seed_is_reproducible(sales_records):
    first = run_forecast_pipeline(sales_records, epochs=3, seed=123)
    second = run_forecast_pipeline(sales_records, epochs=3, seed=123)

    assert [p.predicted for p in first.points] == [p.predicted for p in second.points]


def test_training_failure_aborts_without_partial_forecast(sales_records, monkeypatch):
    def failing_train(*args, **kwargs):
        raise RuntimeError("boom")

    predicted = []
    monkeypatch.setattr(forecasting, "train_dense_model", failing_train)
    monkeypatch.setattr(forecasting, "predict_point", lambda *a, **k: predicted.append(a))

    with pytest.raises(RuntimeError):
        run_forecast_pipeline(sales_records)
    assert predicted == []


def test_prediction_failure_aborts_without_partial_forecast(sales_records, monkeypatch):
    real_predict = forecasting.predict_point
    calls = []

    def flaky_predict(model, month, product_idx):
        calls.append((month, product_idx))
        if len(calls) == 4:
            raise RuntimeError("inference failed")
        return real_predict(model, month, product_idx)

    monkeypatch.setattr(forecasting, "predict_point", flaky_predict)

    with pytest.raises(RuntimeError, match="inference failed"):
        run_forecast_pipeline(sales_records, epochs=2)
    assert len(calls) == 4


@pytest.mark.parametrize("kwargs", [
    {"epochs": 0},
    {"epochs": -3},
    {"horizon": 0},
    {"hidden_units": 0},
])
def test_non_positive_arguments_rejected_before_training(sales_records, monkeypatch, kwargs):
    calls = []
    monkeypatch.setattr(forecasting, "train_dense_model", lambda *a, **k: calls.append("train"))

    with pytest.raises(ValueError, match="positive integer"):
        run_forecast_pipeline(sales_records, **kwargs)
    assert calls == []


def test_result_mappings_are_read_only(sales_records):
    result = run_forecast_pipeline(sales_records, epochs=2)

    with pytest.raises(TypeError):
        result.product_index["Sprocket"] = 3
    with pytest.raises(TypeError):
        result.history["loss"] = ()
    assert isinstance(result.history["loss"], tuple)


def test_result_does_not_share_caller_containers():
    product_index = {"A": 0}
    history = {"loss": [1.0, 0.5]}
    result = ForecastResult(product_index=product_index, history=history)

    product_index["B"] = 1
    history["loss"].append(0.25)

    assert dict(result.product_index) == {"A": 0}
    assert result.history["loss"] == (1.0, 0.5)
