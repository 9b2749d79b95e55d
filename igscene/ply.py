"""Reader for ASCII PLY polygon meshes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

_INT_MAX = 2**31 - 1


class PlyError(Exception):
    """Raised when a PLY file cannot be opened or is malformed."""


@dataclass(frozen=True)
class PlyMesh:
    """Vertex coordinates and faces (tuples of vertex indices) of a mesh."""

    vertices: list[tuple[float, float, float]] = field(default_factory=list)
    faces: list[tuple[int, ...]] = field(default_factory=list)


class _TokenReader:
    """Whitespace-separated tokens with the ability to skip the rest of a line."""

    def __init__(self, text: str) -> None:
        self._lines: Iterator[str] = iter(text.splitlines())
        self._pending: list[str] = []

    def next_token(self, context: str) -> str:
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                raise PlyError(f"premature end of file {context}")
            self._pending = line.split()[::-1]
        return self._pending.pop()

    def skip_line(self) -> None:
        self._pending = []


def _resolve_name(filename: str | os.PathLike[str]) -> str:
    name = os.fspath(filename)
    if name.rsplit(".", 1)[-1] != "ply":
        name += ".ply"
    return name


def _open(filename: str | os.PathLike[str]) -> _TokenReader:
    name = _resolve_name(filename)
    try:
        text = Path(name).read_text(encoding="latin-1")
    except OSError as exc:
        raise PlyError(f"cannot open file '{name}' for reading") from exc
    reader = _TokenReader(text)
    try:
        magic = reader.next_token("at start of file")
    except PlyError:
        magic = ""
    if magic != "ply":
        raise PlyError("input file does not start with 'ply'")
    reader.skip_line()
    return reader


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PlyError(f"invalid integer '{token}' for {what}") from None


def _parse_float(token: str, what: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise PlyError(f"invalid number '{token}' for {what}") from None


def _read_header(reader: _TokenReader, read_faces: bool) -> tuple[int, int]:
    context = "before end_header"
    # 0: before 'element vertex', 1: before 'element face', 2: after both
    state = 0
    num_vertices = 0
    num_faces = 0

    while True:
        token = reader.next_token(context)
        if token == "end_header":
            if state != 2:
                raise PlyError("'element vertex' or 'element face' not found in header")
            reader.skip_line()
            break
        if token in ("comment", "property"):
            reader.skip_line()
        elif token == "format":
            fmt = reader.next_token(context)
            if fmt != "ascii":
                raise PlyError(f"ply format is '{fmt}', not 'ascii'; cannot read it")
            reader.skip_line()
        elif token == "element":
            kind = reader.next_token(context)
            if kind == "vertex":
                if state != 0:
                    raise PlyError("'element vertex' line comes after 'element face'")
                num_vertices = _parse_int(reader.next_token(context), "vertex count")
                state = 1 if read_faces else 2
            elif read_faces and kind == "face":
                if state != 1:
                    raise PlyError("'element face' line comes before 'element vertex'")
                num_faces = _parse_int(reader.next_token(context), "face count")
                state = 2
            reader.skip_line()

    if num_vertices <= 0:
        raise PlyError("vertex count not found, or it is zero or negative")
    if read_faces and num_faces <= 0:
        raise PlyError("face count not found, or it is zero or negative")
    if num_vertices > _INT_MAX:
        raise PlyError("vertex count exceeds the largest 'int' value")
    if read_faces and num_faces > _INT_MAX:
        raise PlyError("face count exceeds the largest 'int' value")
    return num_vertices, num_faces


def _read_vertex_list(reader: _TokenReader, count: int) -> list[tuple[float, float, float]]:
    context = "in vertex list"
    vertices = []
    for _ in range(count):
        x, y, z = (_parse_float(reader.next_token(context), "vertex coordinate") for _ in range(3))
        reader.skip_line()
        vertices.append((x, y, z))
    return vertices


def _read_face_list(
    reader: _TokenReader, vertices_per_face: int, num_vertices: int, count: int
) -> list[tuple[int, ...]]:
    context = "in face list"
    faces = []
    for _ in range(count):
        n = _parse_int(reader.next_token(context), "face vertex count")
        if n != vertices_per_face:
            raise PlyError("found a face whose vertex count differs from the expected one")
        indices = []
        for _ in range(vertices_per_face):
            index = _parse_int(reader.next_token(context), "vertex index")
            if index >= num_vertices:
                raise PlyError("found a vertex index equal to or above the number of vertices")
            indices.append(index)
        reader.skip_line()
        faces.append(tuple(indices))
    return faces


def read_faces(filename: str | os.PathLike[str], vertices_per_face: int) -> PlyMesh:
    """Read a mesh whose faces all have ``vertices_per_face`` vertices.

    A ``.ply`` extension is appended to ``filename`` when it lacks one.
    """
    if vertices_per_face <= 2:
        raise ValueError("faces need at least three vertices")
    reader = _open(filename)
    num_vertices, num_faces = _read_header(reader, read_faces=True)
    vertices = _read_vertex_list(reader, num_vertices)
    faces = _read_face_list(reader, vertices_per_face, num_vertices, num_faces)
    return PlyMesh(vertices=vertices, faces=faces)


def read(filename: str | os.PathLike[str]) -> PlyMesh:
    """Read a triangle mesh."""
    return read_faces(filename, 3)


def read_quads(filename: str | os.PathLike[str]) -> PlyMesh:
    """Read a mesh made of quadrilaterals."""
    return read_faces(filename, 4)


def read_vertices(filename: str | os.PathLike[str]) -> list[tuple[float, float, float]]:
    """Read only the vertex coordinates of a PLY file, ignoring any faces."""
    reader = _open(filename)
    num_vertices, _ = _read_header(reader, read_faces=False)
    return _read_vertex_list(reader, num_vertices)