"""HTTP adapter around the restaurant valuation engine."""
