"""GraphQL valuation service over the fixings library."""
