from .codec import to_record
from .errors import ExportError, MissingTableNameError
from .exporter import export_to_csv
from .fetcher import fetch_table
from .params import ExportParams, get_input_params

__all__ = [
    "ExportError",
    "ExportParams",
    "MissingTableNameError",
    "export_to_csv",
    "fetch_table",
    "get_input_params",
    "to_record",
]
