"""Shared utilities package."""

from .decimal_utils import coerce_decimal, sum_decimals
from .utils import get_project_root

__all__ = ["coerce_decimal", "sum_decimals", "get_project_root"]
