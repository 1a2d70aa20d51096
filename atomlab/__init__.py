# atomlab/__init__.py
from .catalog import Catalog, get_catalog, load_catalog
from .choreographer import Choreographer, evaluate_reaction
from .entities import Element, EntityKind, Molecule, Reaction
from .info import describe_entity
from .lab_session import Frame, LabSession
from .localization import get_translator
from .thermal import PhysicalState, classify

__all__ = [
    "Catalog", "get_catalog", "load_catalog",
    "Choreographer", "evaluate_reaction",
    "Element", "EntityKind", "Molecule", "Reaction",
    "describe_entity", "Frame", "LabSession", "get_translator",
    "PhysicalState", "classify"
]
