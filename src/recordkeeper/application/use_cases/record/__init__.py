"""Record verification, disposal and reporting use cases."""
