#////////////////////////////////////////////////////////////////////////////////#
# File:         utils.py                                                         #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-03-18                                                       #
#////////////////////////////////////////////////////////////////////////////////#

"""
Utility functions for the sales forecasting project.
"""
import json
import logging
import random
from pathlib import Path
from typing import Dict, Union

import numpy as np
import torch

from sales_forecasting import config

logger = logging.getLogger(__name__)


def create_directory(directory: Union[str, Path]) -> None:
    """create directory if it doesnt exist"""
    Path(directory).mkdir(parents=True, exist_ok=True)


def save_json(data: Dict, filepath: Union[str, Path]) -> None:
    """Save dict to JSON."""
    with open(filepath, 'w') as f:
        json.dump(data, f, indent=4)


def setup_torch_device(preferred: str = "auto") -> torch.device:
    """
    setup torch device (cpu or cuda)

    "auto" picks cuda when available. Asking for cuda on a machine without it
    falls back to cpu.
    """
    if preferred not in ("auto", "cpu", "cuda"):
        raise ValueError(f"Unknown device '{preferred}', expected auto, cpu or cuda")

    if preferred != "cpu" and torch.cuda.is_available():
        device = torch.device("cuda")
        logger.info(f"Using GPU: {torch.cuda.get_device_name(0)}")
    else:
        if preferred == "cuda":
            logger.warning("CUDA requested but not available, falling back to CPU")
        device = torch.device("cpu")
        logger.info("Using CPU")
    return device


def set_random_seed(seed: int = None) -> None:
    """set random seed for reproducibility"""
    if seed is None:
        seed = config.RANDOM_SEED

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)
        torch.backends.cudnn.deterministic = True
        torch.backends.cudnn.benchmark = False


def format_time(seconds: float) -> str:
    """format seconds into readable string"""
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{int(hours)}h {int(minutes)}m {int(seconds)}s"
