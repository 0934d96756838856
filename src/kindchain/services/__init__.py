"""Service layer: adapts the Kind domain to CLI-friendly results."""
