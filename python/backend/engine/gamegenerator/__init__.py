from backend.engine.gamegenerator.generator import LayoutGenerator

__all__ = ["LayoutGenerator"]
