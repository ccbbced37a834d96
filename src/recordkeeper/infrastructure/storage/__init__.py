"""Content storage adapters."""
