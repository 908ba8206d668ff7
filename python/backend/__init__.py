"""Water sort puzzle backend: models and game engine."""
