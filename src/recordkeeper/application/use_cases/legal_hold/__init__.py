"""Legal hold use cases."""
