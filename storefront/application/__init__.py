"""Application layer: commands and handlers orchestrating the domain."""
