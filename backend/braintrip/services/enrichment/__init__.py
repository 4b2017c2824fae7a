"""POI enrichment (description + fun fact)."""

from .service import PLACEHOLDER_DESCRIPTION, EnrichmentService, default_description

__all__ = ["PLACEHOLDER_DESCRIPTION", "EnrichmentService", "default_description"]
