from .bom_gids import BomGidsTable

__all__ = ["BomGidsTable"]
