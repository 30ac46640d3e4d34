"""Ray–surface intersection records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

import numpy as np


class _Target(Enum):
    NONE = auto()
    LIGHT = auto()
    MATERIAL = auto()


@dataclass(eq=False)
class Hit:
    """Where a ray met a surface, and the light or material found there."""

    t: float = 0.0
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    backface: bool = False
    _kind: _Target = field(default=_Target.NONE, init=False, repr=False)
    _target: Any = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)
        self.normal = np.asarray(self.normal, dtype=float)

    def is_light(self) -> bool:
        return self._kind is _Target.LIGHT

    def is_material(self) -> bool:
        return self._kind is _Target.MATERIAL

    @property
    def light(self):
        return self._target if self._kind is _Target.LIGHT else None

    @property
    def material(self):
        return self._target if self._kind is _Target.MATERIAL else None

    def set_material(self, material) -> None:
        self._target = material
        self._kind = _Target.NONE if material is None else _Target.MATERIAL

    def set_light(self, light) -> None:
        self._target = light
        self._kind = _Target.NONE if light is None else _Target.LIGHT