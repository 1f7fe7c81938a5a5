"""Core package - configuration, shared result types and the composition root."""
