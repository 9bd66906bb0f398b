"""
multiorder: maximum-likelihood multi-order models of path data on graphs,
with likelihood-ratio selection of the optimal model order.
"""

from .errors import DegeneracyError, PreconditionError
from .models import (
    OrderModel,
    Path,
    as_paths,
    fit_fixed_order_model,
    fit_layers,
    fit_multi_order_model,
    likelihood,
    log_likelihood,
)
from .graph import AdjacencyProvider, NxAdjacency, generate_paths, iter_paths
from .selection import (
    OrderSelection,
    degrees_of_freedom,
    lrt_p_value,
    matrix_df,
    select_order,
)
from .io import read_edgelist_graph, read_paths

__all__ = [
    # Errors
    "DegeneracyError",
    "PreconditionError",
    # Models
    "OrderModel",
    "Path",
    "as_paths",
    "fit_fixed_order_model",
    "fit_layers",
    "fit_multi_order_model",
    "likelihood",
    "log_likelihood",
    # Graph
    "AdjacencyProvider",
    "NxAdjacency",
    "generate_paths",
    "iter_paths",
    # Selection
    "OrderSelection",
    "degrees_of_freedom",
    "lrt_p_value",
    "matrix_df",
    "select_order",
    # IO
    "read_edgelist_graph",
    "read_paths",
]

__version__ = "0.1.0"
