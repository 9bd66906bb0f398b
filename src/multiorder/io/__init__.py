from .pathsets import parse_path_line, read_edgelist_graph, read_paths

__all__ = [
    "parse_path_line",
    "read_edgelist_graph",
    "read_paths",
]
