"""Sample dataset used by the `sample` command."""

import csv
from pathlib import Path

from ..utils.logger import get_logger

logger = get_logger('sample_data')


SAMPLE_RECORDS = [
    ['Product', 'Price', 'Quantity', 'Revenue', 'Category', 'Rating'],
    ['Laptop', '999.99', '15', '14999.85', 'Electronics', '4.5'],
    ['Mouse', '25.50', '45', '1147.50', 'Electronics', '4.2'],
    ['Keyboard', '75.00', '30', '2250.00', 'Electronics', '4.7'],
    ['Monitor', '299.99', '12', '3599.88', 'Electronics', '4.4'],
    ['Desk Chair', '199.50', '8', '1596.00', 'Furniture', '4.1'],
    ['Notebook', '5.99', '100', '599.00', 'Stationery', '4.0'],
    ['Pen Set', '12.99', '75', '974.25', 'Stationery', '4.3'],
    ['Coffee Mug', '8.50', '60', '510.00', 'Kitchen', '4.6'],
    ['Water Bottle', '15.99', '40', '639.60', 'Kitchen', '4.4'],
    ['Backpack', '45.00', '25', '1125.00', 'Accessories', '4.8'],
]


def create_sample_data(path='sample_data.csv') -> Path:
    """Write the sample product dataset to `path` and return it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerows(SAMPLE_RECORDS)

    logger.info(f"Sample data written: {path} ({len(SAMPLE_RECORDS) - 1} rows)")
    return path
