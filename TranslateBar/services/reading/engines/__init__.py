"""Reading backend adapters."""
