"""Output layer — Rich rendering of command results and person lists."""
