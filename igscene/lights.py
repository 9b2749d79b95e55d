"""Light sources and the collection that activates them.

Activating a light records its colours, position and enabled flag in a
:class:`~igscene.materials.RenderState` under the light's index.
"""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterator

import numpy as np

from igscene.materials import RGBA, RenderState
from igscene.matrices import rotation

MAX_LIGHTS = 8
_KEY_STEP = 3.0
_LAT_LIMIT = 90.0
_LIT_PROGRAMS = (3, 4)


class SpecialKey(enum.IntEnum):
    """Key codes of the non-character keys a light responds to."""

    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    HOME = 268


class LightSource(abc.ABC):
    """A light with one colour for its ambient, diffuse and specular parts.

    ``index`` is the slot the light occupies once inserted in a
    :class:`LightCollection`; until then the light cannot be activated.
    """

    def __init__(self, color: RGBA) -> None:
        self.ambient: RGBA = tuple(color)
        self.diffuse: RGBA = tuple(color)
        self.specular: RGBA = tuple(color)
        self.index: int | None = None

    def _activate_colors(self, state: RenderState) -> dict[str, tuple[float, ...]] | None:
        if self.index is None:
            return None
        state.enabled_lights.add(self.index)
        params = state.light_params.setdefault(self.index, {})
        params["ambient"] = tuple(float(c) for c in self.ambient)
        params["diffuse"] = tuple(float(c) for c in self.diffuse)
        params["specular"] = tuple(float(c) for c in self.specular)
        return params

    @abc.abstractmethod
    def activate(self, state: RenderState) -> None:
        """Enable the light in ``state`` and set its parameters."""

    @abc.abstractmethod
    def handle_special_key(self, key: int) -> bool:
        """Change the light in response to a key; return True if it was used."""

    @abc.abstractmethod
    def vary_angle(self, angle: int, increment: float) -> None:
        """Add ``increment`` degrees to longitude (``angle == 0``) or latitude."""


class DirectionalLight(LightSource):
    """A light at infinity whose direction is given by longitude and latitude."""

    def __init__(self, longitude: float, latitude: float, color: RGBA) -> None:
        super().__init__(color)
        self.initial_longitude = float(longitude)
        self.initial_latitude = float(latitude)
        self.longitude = float(longitude)
        self.latitude = float(latitude)

    @property
    def direction(self) -> tuple[float, float, float, float]:
        """Homogeneous direction (w = 0) towards the light."""
        m = rotation(self.longitude, 0.0, 1.0, 0.0) @ rotation(self.latitude, -1.0, 0.0, 0.0)
        d = m @ np.array([0.0, 0.0, 1.0, 0.0])
        return tuple(float(v) for v in d)

    def activate(self, state: RenderState) -> None:
        params = self._activate_colors(state)
        if params is not None:
            params["position"] = self.direction

    def handle_special_key(self, key: int) -> bool:
        if key == SpecialKey.RIGHT:
            self.longitude += _KEY_STEP
        elif key == SpecialKey.LEFT:
            self.longitude -= _KEY_STEP
        elif key == SpecialKey.UP:
            self.latitude = min(self.latitude + _KEY_STEP, _LAT_LIMIT)
        elif key == SpecialKey.DOWN:
            self.latitude = max(self.latitude - _KEY_STEP, -_LAT_LIMIT)
        elif key == SpecialKey.HOME:
            self.latitude = self.initial_latitude
            self.longitude = self.initial_longitude
        else:
            return False
        return True

    def vary_angle(self, angle: int, increment: float) -> None:
        if angle == 0:
            self.longitude += increment
        else:
            self.latitude += increment


class PositionalLight(LightSource):
    """A point light at a fixed position."""

    def __init__(self, position: tuple[float, float, float], color: RGBA) -> None:
        super().__init__(color)
        x, y, z = position
        self.position = (float(x), float(y), float(z))

    def activate(self, state: RenderState) -> None:
        params = self._activate_colors(state)
        if params is not None:
            params["position"] = (*self.position, 1.0)

    def handle_special_key(self, key: int) -> bool:
        return False

    def vary_angle(self, angle: int, increment: float) -> None:
        """Positional lights have no angles; nothing changes."""


class LightCollection:
    """Up to ``max_lights`` lights, each in its own slot."""

    def __init__(self, max_lights: int = MAX_LIGHTS) -> None:
        self.max_lights = max_lights
        self._lights: list[LightSource] = []

    def __len__(self) -> int:
        return len(self._lights)

    def __iter__(self) -> Iterator[LightSource]:
        return iter(self._lights)

    def __getitem__(self, i: int) -> LightSource:
        return self._lights[i]

    def insert(self, light: LightSource) -> None:
        """Add a light in the next free slot; ignored when every slot is taken."""
        if light is None:
            raise TypeError("cannot insert None as a light")
        if len(self._lights) < self.max_lights:
            light.index = len(self._lights)
            self._lights.append(light)

    def activate(self, program_id: int, state: RenderState) -> None:
        """Enable the lights for lit programs (3 and 4) and disable the other slots."""
        if program_id in _LIT_PROGRAMS:
            for light in self._lights:
                light.activate(state)
            unused = range(len(self._lights), self.max_lights)
        else:
            unused = range(self.max_lights)
        for i in unused:
            state.enabled_lights.discard(i)