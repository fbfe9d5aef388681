"""Read-only query and export service for payment operations."""
