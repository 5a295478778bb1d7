"""AI Video Studio backend."""
