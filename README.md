# igscene

Building blocks for a small fixed-pipeline 3D renderer. None of them needs a
window or a GPU.

## Modules

- `igscene.matrices`: 4x4 homogeneous matrices as NumPy arrays, laid out so
  that a column vector `p` is transformed as `m @ p`. It provides `identity`,
  `from_rows`, `from_columns`, `translation`, `scaling`, `rotation` (angle in
  degrees about an axis), `look_at`, `frustum`, `orthographic`, `perspective`,
  `transpose3x3`, `viewport` / `viewport_inverse` and `view` / `view_inverse`.
  Degenerate view volumes and zero-length axes raise `ValueError`.
- `igscene.ply`: a reader for ASCII PLY meshes. `read` reads triangles,
  `read_quads` reads quadrilaterals, `read_faces(filename, n)` reads faces of
  `n` vertices, and `read_vertices` reads only the coordinates. The mesh
  readers return a `PlyMesh` with `vertices` (xyz tuples) and `faces` (index
  tuples). A `.ply` extension is appended when the name lacks one. Missing
  files, non-ASCII formats, bad headers, faces of the wrong size and
  out-of-range indices raise `PlyError`.
- `igscene.diagnostics`: `error_code_name` and `error_description` for
  OpenGL error codes, `check_gl_error(code, filename, line)` (raises
  `GLStateError`, a `ProgramError`), `parse_version` turning strings such
  as `"4.6.0 vendor"` into a `GLVersion` with `supports(min_major,
  min_minor)`, and `strip_path`.
- `igscene.pixels`: operations on packed RGB byte buffers that return new
  `bytes`: `dword_aligned` (returns the padded buffer and its row width),
  `unalign`, `vertical_flip`, `swap_red_blue`, `luminance` (one byte per
  pixel) and `to_grayscale`.
- `igscene.images`: `read_jpeg_rgb`, `jpeg_dimensions` and `write_rgb_jpeg`
  (colour or greyscale, quality clamped to 1..100), plus the `Image` class
  (`from_file`, `pixel`, `save`). Failures raise `ImageError`.
- `igscene.materials`: `Texture`, `Material` (`from_texture_file`,
  `with_texture`, `with_color`, `flat`, `reset_colors`, `activate`),
  `MaterialStack` (`activate`, `activate_current`, `push`, `pop`), and the
  preset materials `can_material`, `can_lid_material`, `wooden_pawn_material`,
  `white_pawn_material` and `black_pawn_material`. Activation writes into a
  `RenderState`, which records lighting, colour, surface reflectivities,
  bound and uploaded textures and texture-coordinate generation.
- `igscene.lights`: `DirectionalLight` (longitude and latitude, changed by
  `vary_angle` or the `SpecialKey` arrow and home keys), `PositionalLight`,
  and `LightCollection`, which holds at most eight lights. The collection
  enables its lights in the `RenderState` only for programs 3 and 4, and
  disables every unused slot.

## Installation

    pip install .

## Example

    from igscene import matrices, ply

    mesh = ply.read("model.ply")
    model = matrices.translation(0, 1, 0) @ matrices.rotation(45, 0, 1, 0)
    proj = matrices.perspective(60, 1.0, 0.1, 100)

## What it does not do

The package draws nothing. It opens no window and talks to no graphics
driver. Materials and lights only record their effect in a `RenderState`,
and `check_gl_error` only reports on an error code that you pass it. There
are no mesh or scene-graph classes. Binary PLY files cannot be read.

## Running the tests

    pip install .[test]
    pytest