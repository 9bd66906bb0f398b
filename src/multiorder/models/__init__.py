from .kmodel import OrderModel, Path, as_paths, fit_fixed_order_model
from .multiorder import fit_layers, fit_multi_order_model, likelihood, log_likelihood

__all__ = [
    "OrderModel",
    "Path",
    "as_paths",
    "fit_fixed_order_model",
    "fit_layers",
    "fit_multi_order_model",
    "likelihood",
    "log_likelihood",
]
