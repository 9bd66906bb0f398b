from .order import (
    OrderSelection,
    degrees_of_freedom,
    lrt_p_value,
    matrix_df,
    select_order,
)

__all__ = [
    "OrderSelection",
    "degrees_of_freedom",
    "lrt_p_value",
    "matrix_df",
    "select_order",
]
