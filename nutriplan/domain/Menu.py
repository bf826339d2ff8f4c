"""Menu entities returned by the menu provider: four slot sources plus nutrients."""
import random
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class MenuSlotSource:
    name: str
    meal_id: Optional[int] = None
    title: Optional[str] = None
    options: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def identified(self) -> bool:
        return self.meal_id is not None

    def choose(self, rng: random.Random) -> str:
        '''Returns the provider title, or one of the options picked with rng.'''
        if self.title:
            return self.title
        if self.options:
            return rng.choice(self.options)
        return self.name


@dataclass(frozen=True)
class Menu:
    slots: Tuple[MenuSlotSource, ...]
    nutrients: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        if len(self.slots) != 4:
            raise ValueError(f"A menu needs exactly 4 slots, got {len(self.slots)}")
