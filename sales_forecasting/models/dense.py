#////////////////////////////////////////////////////////////////////////////////#
# File:         dense.py                                                         #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2025-04-02                                                       #
#////////////////////////////////////////////////////////////////////////////////#

"""
Dense feed-forward regressor for monthly sales forecasting.

The network maps a (month, product index) pair to a predicted quantity.
"""
import logging
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import torch
import torch.nn as nn
import torch.optim as optim

from sales_forecasting import config
from sales_forecasting.exceptions import InvalidTrainingDataError, TrainingError

logger = logging.getLogger(__name__)


class DenseRegressor(nn.Module):
    """
    Single hidden layer regressor: Linear -> ReLU -> Linear.
    """
    def __init__(
        self,
        input_dim: int = config.INPUT_DIM,
        hidden_units: int = config.DEFAULT_HIDDEN_UNITS,
        output_dim: int = config.OUTPUT_DIM
    ):
        """
        Initialize the regressor.

        Args:
            input_dim: Number of input features (month, product index)
            hidden_units: Width of the hidden layer
            output_dim: Number of output units
        """
        super(DenseRegressor, self).__init__()

        # Store architecture parameters for logging and summaries
        self.input_dim = input_dim
        self.hidden_units = hidden_units
        self.output_dim = output_dim

        self.hidden = nn.Linear(input_dim, hidden_units)
        self.activation = nn.ReLU()
        # Linear output, quantities are unbounded regression targets
        self.output = nn.Linear(hidden_units, output_dim)

    def forward(self, features: torch.Tensor) -> torch.Tensor:
        """
        Forward pass.

        Args:
            features: Tensor of shape (batch_size, input_dim)

        Returns:
            Tensor of shape (batch_size, output_dim)
        """
        return self.output(self.activation(self.hidden(features)))


def create_dense_model(
    input_dim: int = config.INPUT_DIM,
    hidden_units: int = config.DEFAULT_HIDDEN_UNITS
) -> DenseRegressor:
    """
    Factory function to create an untrained regressor.

    Args:
        input_dim: Number of input features
        hidden_units: Width of the hidden layer

    Returns:
        Configured DenseRegressor with randomly initialised weights
    """
    model = DenseRegressor(
        input_dim=input_dim,
        hidden_units=hidden_units,
        output_dim=config.OUTPUT_DIM
    )
    total_params = sum(p.numel() for p in model.parameters())
    logger.debug(f"Created dense regressor: {input_dim} -> {hidden_units} (relu) -> "
                 f"{config.OUTPUT_DIM}, {total_params} parameters")
    return model


def to_training_tensors(
    features: Sequence[Sequence[float]],
    targets: Sequence[float]
) -> Dict[str, torch.Tensor]:
    """
    Convert encoded features and targets to float32 tensors.

    Returns:
        Dictionary with 'X' of shape (n, input_dim) and 'y' of shape (n, 1)
    """
    X = torch.tensor(np.asarray(features, dtype=np.float32))
    y = torch.tensor(np.asarray(targets, dtype=np.float32)).reshape(-1, 1)
    return {"X": X, "y": y}


def train_dense_model(
    model: DenseRegressor,
    features: Sequence[Sequence[float]],
    targets: Sequence[float],
    epochs: int = config.DEFAULT_EPOCHS,
    learning_rate: float = config.DEFAULT_LEARNING_RATE,
    device: Optional[Union[str, torch.device]] = None
) -> Dict[str, List[float]]:
    """
    Fit the regressor on the full batch for a fixed number of epochs.

    Every epoch is one Adam step on all examples with mean squared error loss.
    There is no shuffling, batching, validation or early stopping.

    Args:
        model: Regressor to train (updated in place)
        features: Encoded feature pairs
        targets: Quantities aligned with features
        epochs: Number of training epochs
        learning_rate: Learning rate for Adam
        device: Device to train on, defaults to "cpu"

    Returns:
        Dictionary with training history ('loss' per epoch)

    Raises:
        InvalidTrainingDataError: features or targets are empty or misaligned
        TrainingError: the loss became NaN or infinite
    """
    if len(features) == 0 or len(targets) == 0:
        raise InvalidTrainingDataError("Invalid input or output data: nothing to train on")
    if len(features) != len(targets):
        raise InvalidTrainingDataError(
            f"Features and targets length mismatch: {len(features)} vs {len(targets)}"
        )

    if device is None:
        device = "cpu"

    tensors = to_training_tensors(features, targets)
    X = tensors["X"].to(device)
    y = tensors["y"].to(device)
    model = model.to(device)

    optimizer = optim.Adam(model.parameters(), lr=learning_rate)
    criterion = nn.MSELoss()

    history = {"loss": []}

    model.train()
    for epoch in range(epochs):
        optimizer.zero_grad()
        y_pred = model(X)
        loss = criterion(y_pred, y)

        if torch.isnan(loss) or torch.isinf(loss):
            raise TrainingError(f"NaN/Inf detected in loss at epoch {epoch + 1}")

        loss.backward()
        optimizer.step()

        history["loss"].append(loss.item())
        logger.debug(f"Epoch {epoch + 1}/{epochs}, Loss: {loss.item():.4f}")

    model.eval()
    if history["loss"]:
        logger.info(f"Trained on {len(features)} examples for {epochs} epochs, "
                    f"final loss: {history['loss'][-1]:.4f}")
    return history


def predict_point(model: DenseRegressor, month: int, product_idx: int) -> float:
    """
    Run one forward pass for a single (month, product index) pair.

    The 1x2 input and the scalar output only live for the duration of the
    call; they are released before returning, on success or failure.
    """
    device = next(model.parameters()).device
    model.eval()
    inputs = torch.tensor([[float(month), float(product_idx)]], dtype=torch.float32, device=device)
    try:
        with torch.no_grad():
            prediction = model(inputs)
            try:
                return float(prediction.item())
            finally:
                del prediction
    finally:
        del inputs
