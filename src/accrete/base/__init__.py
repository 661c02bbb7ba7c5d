__all__ = ["DustBand", "DustCloud", "Planet", "Ring", "Star", "System", "Universe"]

from .disk import DustBand, DustCloud
from .planet import Planet, Ring
from .star import Star
from .system import System
from .universe import Universe
