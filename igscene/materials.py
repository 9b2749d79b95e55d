"""Materials, textures and the fixed-function state they configure.

Activating a texture or a material does not talk to a graphics driver.
It records the changes in a :class:`RenderState`, which holds the parts
of a fixed-function pipeline state that materials and lights touch.
"""

from __future__ import annotations

import enum
import itertools
import os
from dataclasses import dataclass, field, replace

from igscene.images import Image

RGBA = tuple[float, float, float, float]
Plane = tuple[float, float, float, float]

OPAQUE_BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)

_texture_ids = itertools.count(1)


class TextureGenMode(enum.Enum):
    """How texture coordinates are generated for primitives."""

    DISABLED = "disabled"
    OBJECT_COORDS = "object"
    EYE_COORDS = "eye"


@dataclass(frozen=True)
class SurfaceColors:
    """Reflectivities of one face side, plus the specular exponent."""

    emission: RGBA = OPAQUE_BLACK
    ambient: RGBA = OPAQUE_BLACK
    diffuse: RGBA = OPAQUE_BLACK
    specular: RGBA = OPAQUE_BLACK
    exponent: float = 1.0


@dataclass
class RenderState:
    """The fixed-function pipeline state changed by materials and lights.

    ``textures`` maps texture identifiers to the images uploaded for them;
    ``tex_gen_planes`` holds the (S, T) plane coefficients last set for each
    generation mode; ``light_params`` maps light indices to named parameters.
    """

    lighting: bool = False
    texture_2d: bool = False
    bound_texture: int | None = None
    textures: dict[int, Image] = field(default_factory=dict)
    tex_gen_s: bool = False
    tex_gen_t: bool = False
    tex_gen_mode: TextureGenMode = TextureGenMode.DISABLED
    tex_gen_planes: dict[TextureGenMode, tuple[Plane, Plane]] = field(default_factory=dict)
    color: RGBA = (1.0, 1.0, 1.0, 1.0)
    front: SurfaceColors = field(default_factory=SurfaceColors)
    back: SurfaceColors = field(default_factory=SurfaceColors)
    enabled_lights: set[int] = field(default_factory=set)
    light_params: dict[int, dict[str, tuple[float, ...]]] = field(default_factory=dict)


@dataclass(eq=False)
class Texture:
    """A texture image and the way it is applied while active."""

    image: Image
    gen_mode: TextureGenMode = TextureGenMode.DISABLED
    coefs_s: Plane = (1.0, 0.0, 0.0, 0.0)
    coefs_t: Plane = (0.0, 1.0, 0.0, 0.0)
    ident: int = field(default_factory=lambda: next(_texture_ids))
    sent: bool = field(default=False, init=False)

    def _send(self, state: RenderState) -> None:
        if self.gen_mode is not TextureGenMode.DISABLED:
            state.tex_gen_planes[self.gen_mode] = (self.coefs_s, self.coefs_t)
        state.bound_texture = self.ident
        state.textures[self.ident] = self.image
        self.sent = True

    def activate(self, state: RenderState) -> None:
        """Upload the image the first time, then enable and bind the texture."""
        if not self.sent:
            self._send(state)
        state.texture_2d = True
        state.bound_texture = self.ident
        if self.gen_mode is TextureGenMode.DISABLED:
            state.tex_gen_s = False
            state.tex_gen_t = False
        else:
            state.tex_gen_s = True
            state.tex_gen_t = True
            state.tex_gen_mode = self.gen_mode


@dataclass(eq=False)
class Material:
    """Surface attributes of an object, including an optional texture.

    With ``lighting`` false the object is drawn in the flat ``color``;
    otherwise ``front`` and ``back`` give the reflectivities of each side.
    """

    name: str = ""
    lighting: bool = False
    texture: Texture | None = None
    color: RGBA = OPAQUE_BLACK
    front: SurfaceColors = field(default_factory=SurfaceColors)
    back: SurfaceColors = field(default_factory=SurfaceColors)

    @classmethod
    def from_texture_file(cls, filename: str | os.PathLike[str]) -> Material:
        """Create a lit material textured with the JPEG image in ``filename``."""
        return cls(
            lighting=True,
            texture=Texture(Image.from_file(filename)),
            front=SurfaceColors(
                diffuse=(0.5, 0.5, 0.5, 1.0),
                specular=(1.0, 1.0, 1.0, 1.0),
            ),
            back=SurfaceColors(
                diffuse=(0.2, 0.2, 0.2, 1.0),
                specular=(0.2, 0.2, 0.2, 1.0),
            ),
        )

    @classmethod
    def with_texture(
        cls, texture: Texture | None, ka: float, kd: float, ks: float, exponent: float
    ) -> Material:
        """Create a lit material from a texture (possibly None) and grey coefficients."""
        colors = SurfaceColors(
            ambient=(ka, ka, ka, 1.0),
            diffuse=(kd, kd, kd, 1.0),
            specular=(ks, ks, ks, 1.0),
            exponent=exponent,
        )
        return cls(
            name="textured material with lighting",
            lighting=True,
            texture=texture,
            front=colors,
            back=colors,
        )

    @classmethod
    def with_color(
        cls,
        color: tuple[float, float, float],
        ka: float,
        kd: float,
        ks: float,
        exponent: float,
    ) -> Material:
        """Create a lit untextured material whose ambient and diffuse parts use ``color``."""
        r, g, b = color
        colors = SurfaceColors(
            ambient=(ka * r, ka * g, ka * b, 1.0),
            diffuse=(kd * r, kd * g, kd * b, 1.0),
            specular=(ks, ks, ks, 1.0),
            exponent=exponent,
        )
        return cls(
            name="flat colour material with lighting",
            lighting=True,
            color=(r, g, b, 1.0),
            front=colors,
            back=colors,
        )

    @classmethod
    def flat(cls, r: float, g: float, b: float) -> Material:
        """Create an unlit untextured material of a single colour."""
        return cls(
            name="flat colour material without lighting",
            lighting=False,
            color=(r, g, b, 1.0),
        )

    def reset_colors(self) -> None:
        """Set every colour and reflectivity to opaque black and exponents to 1."""
        self.color = OPAQUE_BLACK
        self.front = SurfaceColors()
        self.back = SurfaceColors()

    def activate(self, state: RenderState) -> None:
        """Make this material the one used for what is drawn next."""
        if self.lighting:
            state.front = replace(self.front)
            state.back = replace(self.back)
            state.lighting = True
        else:
            state.lighting = False
            state.color = self.color
        if self.texture is None:
            state.texture_2d = False
        else:
            self.texture.activate(state)


class MaterialStack:
    """The current material plus a stack of saved ones."""

    def __init__(self) -> None:
        self.current: Material | None = None
        self._saved: list[Material | None] = []

    def __len__(self) -> int:
        return len(self._saved)

    def activate(self, material: Material | None, state: RenderState) -> None:
        """Make ``material`` current, activating it only when it changes."""
        if material is not self.current:
            self.current = material
            if material is not None:
                material.activate(state)

    def activate_current(self, state: RenderState) -> None:
        """Activate the current material again, if there is one."""
        if self.current is not None:
            self.current.activate(state)

    def push(self) -> None:
        """Save the current material."""
        self._saved.append(self.current)

    def pop(self, state: RenderState) -> None:
        """Restore the most recently saved material."""
        if not self._saved:
            raise IndexError("pop from an empty material stack")
        self.activate(self._saved.pop(), state)


def can_material(texture_file: str | os.PathLike[str] = "../imgs/lata-coke.jpg") -> Material:
    """Material for the body of a soda can."""
    material = Material.with_texture(Texture(Image.from_file(texture_file)), 0.0, 1.0, 1.0, 1.0)
    material.color = (0.5, 0.5, 0.5, 1.0)
    return material


def can_lid_material() -> Material:
    """Material for the lids of a soda can."""
    material = Material.with_color((1.0, 0.2, 0.2), 0.0, 1.0, 1.0, 1.0)
    material.color = (1.0, 0.2, 0.2, 1.0)
    return material


def wooden_pawn_material(
    texture_file: str | os.PathLike[str] = "../imgs/text-madera.jpg",
) -> Material:
    """Material for a wooden chess pawn."""
    material = Material.with_texture(Texture(Image.from_file(texture_file)), 0.0, 1.0, 1.0, 1.0)
    material.color = (0.5, 0.5, 0.5, 1.0)
    return material


def white_pawn_material() -> Material:
    """Material for a white, purely diffuse chess pawn."""
    return Material.with_color((0.9, 0.9, 0.9), 0.9, 1.0, 0.0, 0.0)


def black_pawn_material() -> Material:
    """Material for a black, slightly specular chess pawn."""
    return Material.with_color((0.0, 0.0, 0.0), 0.0, 0.05, 0.2, 0.2)