# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add the repository root (parent of this tests folder) to sys.path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture
def sales_records():
    """Three products over a few months, one record with a bad date."""
    return [
        {"sales_date": "2024-01-15", "product_description": "Widget", "quantity_sold": "5"},
        {"sales_date": "2024-02-03", "product_description": "Gadget", "quantity_sold": "12"},
        {"sales_date": "2024-02-20", "product_description": "Widget", "quantity_sold": "7.5"},
        {"sales_date": "bad-date", "product_description": "Gizmo", "quantity_sold": "3"},
        {"sales_date": "2024-03-11", "product_description": "Gizmo", "quantity_sold": "9"},
        {"sales_date": "2024-04-01", "product_description": "Gadget", "quantity_sold": "10"},
    ]


@pytest.fixture
def sales_csv(tmp_path, sales_records):
    """Write the sample records to a CSV and return its path."""
    lines = ["sales_date,product_description,quantity_sold"]
    for r in sales_records:
        lines.append(f"{r['sales_date']},{r['product_description']},{r['quantity_sold']}")
    csv_path = tmp_path / "sales.csv"
    csv_path.write_text("\n".join(lines) + "\n")
    return csv_path
