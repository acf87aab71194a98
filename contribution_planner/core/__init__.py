"""Pure calculation engine: no I/O, no shared state."""
