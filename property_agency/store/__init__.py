"""In-memory stores for agency portfolios."""

from property_agency.store.agency import Agency, title_case

__all__ = ["Agency", "title_case"]
