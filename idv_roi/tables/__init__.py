from .loader import get_base_tables, get_default_tables, load_tables
from .schema import CompanySizeConfig, IndustryConfig, ROITables

__all__ = [
    "CompanySizeConfig",
    "IndustryConfig",
    "ROITables",
    "get_base_tables",
    "get_default_tables",
    "load_tables",
]
