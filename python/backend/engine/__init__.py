"""Game engine: layout generation, state and gameplay."""
