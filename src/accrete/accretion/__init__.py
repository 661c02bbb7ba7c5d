__all__ = [
    "AccretionDriver",
    "Action",
    "ActionKind",
    "accrete",
    "bombard",
    "coalesce",
    "grow",
    "is_critical",
    "planet",
    "planetary_system",
    "resolve",
]

from .bombardment import bombard
from .collision import Action, ActionKind, coalesce, resolve
from .driver import AccretionDriver, accrete
from .generate import planet, planetary_system
from .growth import grow, is_critical
