from .models import (
    CATEGORY_NAMES,
    CategoryMapping,
    FinancialRanges,
    SheetConfig,
    build_category_mappings,
)

__all__ = [
    "CATEGORY_NAMES",
    "CategoryMapping",
    "FinancialRanges",
    "SheetConfig",
    "build_category_mappings",
]
