"""Building blocks for a generic (S)NARK verifier: fields, loaders, costs, errors and example circuits."""

__version__ = "0.1.0"
__all__ = ["aggregation", "cost", "errors", "field", "loader", "standard_plonk"]