from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import logging

from . import constants as C
from .atom_scene import build_atom_node, build_molecule_node
from .catalog import Catalog, get_catalog
from .choreographer import Choreographer
from .choreography import Phase
from .entities import Entity, EntityKind, entity_kind
from .localization import get_translator, safe_translate
from .scene import Group, empty_scene
from .thermal import ThermalReading, classify, sanitize_level, state_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """Everything a front end needs to draw one moment of the lab."""
    entity: Optional[Entity]
    reading: ThermalReading
    state_label: str
    status_text: str
    root: Group
    animated: bool
    phase: Optional[Phase] = None


class LabSession:
    """
    Runtime state of the visualizer: the selected entry, the thermal slider
    level and the play/pause flag.

    Usage:
        session = LabSession(language="EN")
        session.select("combustion")
        session.set_level(40)
        frame = session.evaluate(now=1.25)
    """

    def __init__(self,
                 catalog: Optional[Catalog] = None,
                 language: str = C.DEFAULT_LANGUAGE,
                 translate: Optional[Callable[[str], str]] = None,
                 level: float = C.DEFAULT_LEVEL,
                 animated: bool = True):
        self.catalog = catalog if catalog is not None else get_catalog()
        self.translate = translate if translate is not None else get_translator(language)
        self.choreographer = Choreographer(self.catalog, self.translate)
        self.level: float = sanitize_level(level)
        self.animated: bool = bool(animated)
        entries = self.catalog.get_all()
        self.selected_id: Optional[str] = entries[0].id if entries else None

        self._builders = {
            EntityKind.ELEMENT: self._element_scene,
            EntityKind.MOLECULE: self._molecule_scene,
            EntityKind.REACTION: self._reaction_scene,
        }

    # -----------------------
    # Inputs
    # -----------------------

    def select(self, entity_id: str) -> bool:
        """Select a catalog entry. Unknown ids leave the selection unchanged."""
        entity = self.catalog.get_by_id(entity_id)
        if entity is None:
            logger.warning(f"Ignoring selection of unknown entity '{entity_id}'")
            return False
        if entity_id != self.selected_id:
            self.choreographer.reset(entity_id)
        self.selected_id = entity_id
        logger.debug(f"Selected {entity.kind.value} '{entity_id}'")
        return True

    def set_level(self, level) -> float:
        self.level = sanitize_level(level)
        return self.level

    def set_animated(self, animated: bool) -> None:
        self.animated = bool(animated)

    def toggle_animation(self) -> bool:
        self.animated = not self.animated
        return self.animated

    @property
    def selected(self) -> Optional[Entity]:
        return self.catalog.get_by_id(self.selected_id) if self.selected_id else None

    # -----------------------
    # Evaluation
    # -----------------------

    def status_text(self, reading: ThermalReading) -> str:
        temp = safe_translate(self.translate, "temp")
        state = safe_translate(self.translate, "state")
        return f"{temp}: {reading.temperature_k:g}K | {state}: {state_label(reading, self.translate)}"

    def evaluate(self, now: float = 0.0) -> Frame:
        """
        Build the frame for presentation time `now`. The session never owns a
        timer; callers pass their own clock.
        """
        entity = self.selected
        reading = classify(self.level, entity)
        root, phase = self.scene_for(entity, reading.temperature_k, now)
        return Frame(
            entity=entity,
            reading=reading,
            state_label=state_label(reading, self.translate),
            status_text=self.status_text(reading),
            root=root,
            animated=self.animated,
            phase=phase,
        )

    def scene_for(self, entity, temperature: float, now: float):
        builder = self._builders.get(entity_kind(entity))
        if builder is None:
            # unknown variant or nothing selected
            return empty_scene(), None
        return builder(entity, temperature, now)

    def _element_scene(self, element, temperature: float, now: float):
        root = Group(key=f"scene/{element.id}", role="scene")
        root.add(build_atom_node(element, scale=C.ELEMENT_VIEW_SCALE, temperature=temperature,
                                 t=now, animated=self.animated, instance_id=element.id))
        return root, None

    def _molecule_scene(self, molecule, temperature: float, now: float):
        root = Group(key=f"scene/{molecule.id}", role="scene")
        root.add(build_molecule_node(molecule, self.catalog, temperature=temperature,
                                     t=now, animated=self.animated))
        return root, None

    def _reaction_scene(self, reaction, temperature: float, now: float):
        frame = self.choreographer.evaluate(reaction, temperature, self.animated, now)
        return frame.root, frame.phase

    def __repr__(self) -> str:
        return f"<LabSession selected={self.selected_id!r} level={self.level:g} animated={self.animated}>"
