#////////////////////////////////////////////////////////////////////////////////#
# File:         forecast_sales.py                                                #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-05-31                                                       #
# Description:  Command line forecast for a sales CSV.                           #
#////////////////////////////////////////////////////////////////////////////////#

"""
Train the monthly sales regressor on a CSV of sales records and write the
product forecast.

Usage:
    sales-forecast --sales-file data/sales.csv --output-dir forecasts/run1
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from sales_forecasting import config
from sales_forecasting.data_loader import load_sales_records
from sales_forecasting.exceptions import ForecastingError
from sales_forecasting.forecasting import run_forecast_pipeline
from sales_forecasting.presentation import build_chart_data, forecast_to_frame
from sales_forecasting.utils import create_directory, format_time, save_json, setup_torch_device

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        argparse.Namespace object containing all parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Train a dense regressor on sales records and forecast monthly sales per product",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # Data arguments
    parser.add_argument(
        "--sales-file",
        type=str,
        required=True,
        help="CSV with sales_date, product_description and quantity_sold columns"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(config.FORECASTS_DIR),
        help="Output directory for forecast files"
    )

    # Model hyperparameters
    parser.add_argument("--epochs", type=int, default=config.DEFAULT_EPOCHS, help="Training epochs")
    parser.add_argument("--hidden-units", type=int, default=config.DEFAULT_HIDDEN_UNITS, help="Hidden layer width")
    parser.add_argument("--learning-rate", type=float, default=config.DEFAULT_LEARNING_RATE, help="Learning rate")
    parser.add_argument("--horizon", type=int, default=config.FORECAST_HORIZON, help="Months to forecast")

    # Other options
    parser.add_argument("--random-seed", type=int, default=None, help="Random seed")
    parser.add_argument("--device", type=str, default="auto", choices=["auto", "cpu", "cuda"], help="Torch device for training and inference")
    parser.add_argument("--log-file", action="store_true", help="Also write logs to the output directory")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    return parser.parse_args(argv)


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> None:
    """configure root logging for the command line run"""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        handlers.append(logging.FileHandler(str(log_path), mode='a'))

    level = logging.DEBUG if verbose else getattr(logging, config.LOGGING_CONFIG["level"])
    logging.basicConfig(
        level=level,
        format=config.LOGGING_CONFIG["format"],
        datefmt=config.LOGGING_CONFIG["datefmt"],
        handlers=handlers,
        force=True
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit code
    """
    args = parse_arguments(argv)

    output_dir = Path(args.output_dir)
    create_directory(output_dir)
    log_path = output_dir / config.OUTPUT_CONFIG["log_file_name"] if args.log_file else None
    setup_logging(args.verbose, log_path)

    logger.info("=" * 60)
    logger.info("SALES FORECAST")
    logger.info("=" * 60)
    logger.info(f"Output directory: {output_dir}")

    start_time = time.time()
    try:
        device = setup_torch_device(args.device)
        records = load_sales_records(args.sales_file)
        result = run_forecast_pipeline(
            records,
            epochs=args.epochs,
            hidden_units=args.hidden_units,
            horizon=args.horizon,
            learning_rate=args.learning_rate,
            seed=args.random_seed,
            device=device
        )
    except (FileNotFoundError, ValueError, ForecastingError) as e:
        logger.error(f"Forecast failed: {e}")
        return 1

    if result.is_empty:
        logger.warning("No forecast produced, nothing to write")
        return 0

    forecast_path = output_dir / config.OUTPUT_CONFIG["forecast_file_name"]
    forecast_to_frame(result.points).to_csv(forecast_path, index=False)
    logger.info(f"Forecast saved to: {forecast_path}")

    chart_path = output_dir / config.OUTPUT_CONFIG["chart_file_name"]
    save_json(build_chart_data(result.points, horizon=args.horizon), chart_path)
    logger.info(f"Chart data saved to: {chart_path}")

    elapsed = time.time() - start_time
    losses = result.history.get("loss", [])
    forecast_info = {
        'timestamp': time.strftime('%Y-%m-%d %H:%M:%S'),
        'sales_file': args.sales_file,
        'hyperparameters': {
            'epochs': args.epochs,
            'hidden_units': args.hidden_units,
            'learning_rate': args.learning_rate,
            'horizon': args.horizon,
            'random_seed': args.random_seed,
            'device': str(device)
        },
        'product_index': dict(result.product_index),
        'training_summary': {
            'epochs_trained': len(losses),
            'final_train_loss': float(losses[-1]) if losses else None
        },
        'n_points': len(result.points),
        'elapsed': format_time(elapsed)
    }
    info_path = output_dir / config.OUTPUT_CONFIG["info_file_name"]
    save_json(forecast_info, info_path)
    logger.info(f"Forecast info saved to: {info_path}")

    logger.info(f"✓ Total time: {format_time(elapsed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
