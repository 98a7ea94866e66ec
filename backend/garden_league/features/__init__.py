"""Feature modules, one per callable domain."""
