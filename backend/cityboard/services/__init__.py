from .currency_map import COUNTRY_CURRENCY, DEFAULT_CURRENCY, currency_for_country
from .orchestrator import SearchContext, SearchOrchestrator, SearchState

__all__ = [
    "COUNTRY_CURRENCY",
    "DEFAULT_CURRENCY",
    "currency_for_country",
    "SearchContext",
    "SearchOrchestrator",
    "SearchState",
]
