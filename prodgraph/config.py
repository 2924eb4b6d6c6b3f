"""Configuration for the weighted product path search."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Defaults applied by `max_product_paths` and the CLI."""

    # Edge attribute holding the multiplicative weight
    weight_attr: str = "weight"

    # Accept NaN/inf weights instead of rejecting them
    allow_non_finite: bool = False

    # CLI defaults when --max-depth / --threshold are omitted
    default_max_depth: int = 7
    default_threshold: float = 0.3

    def resolve_weight_attr(self, override: Optional[str] = None) -> str:
        """Return the explicit attribute name if given, else the configured one."""
        return override if override else self.weight_attr


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
