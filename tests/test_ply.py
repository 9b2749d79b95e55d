import pytest

from igscene.ply import PlyError, PlyMesh, read, read_faces, read_quads, read_vertices

HEADER = """ply
format ascii 1.0
comment sample mesh
element vertex {nv}
property float x
property float y
property float z
element face {nf}
property list uchar int vertex_indices
end_header
"""

VERTICES = [(0.0, 0.0, 0.0), (1.5, 0.0, 0.0), (0.0, 2.5, 0.0), (0.0, 0.0, -3.25)]


def _vertex_lines(vertices=VERTICES, extra=""):
    return "".join(f"{x} {y} {z}{extra}\n" for x, y, z in vertices)


def _write(tmp_path, text, name="mesh.ply"):
    path = tmp_path / name
    path.write_text(text)
    return path


def _triangles_file(tmp_path, name="mesh.ply"):
    text = HEADER.format(nv=4, nf=2) + _vertex_lines() + "3 0 1 2\n3 0 2 3\n"
    return _write(tmp_path, text, name)


def test_read_triangles(tmp_path):
    mesh = read(_triangles_file(tmp_path))
    assert mesh == PlyMesh(vertices=VERTICES, faces=[(0, 1, 2), (0, 2, 3)])


def test_extension_is_appended(tmp_path):
    _triangles_file(tmp_path)
    mesh = read(str(tmp_path / "mesh"))
    assert mesh.vertices == VERTICES


def test_extra_properties_are_ignored(tmp_path):
    text = HEADER.format(nv=4, nf=1) + _vertex_lines(extra=" 255 0 0") + "3 1 2 3 9 9\n"
    mesh = read(_write(tmp_path, text))
    assert mesh.vertices == VERTICES
    assert mesh.faces == [(1, 2, 3)]


def test_read_quads(tmp_path):
    text = HEADER.format(nv=4, nf=1) + _vertex_lines() + "4 0 1 2 3\n"
    mesh = read_quads(_write(tmp_path, text))
    assert mesh.faces == [(0, 1, 2, 3)]


def test_quad_face_rejected_by_triangle_reader(tmp_path):
    text = HEADER.format(nv=4, nf=1) + _vertex_lines() + "4 0 1 2 3\n"
    with pytest.raises(PlyError, match="vertex count differs"):
        read(_write(tmp_path, text))


def test_read_faces_requires_polygons():
    with pytest.raises(ValueError):
        read_faces("unused.ply", 2)


def test_read_vertices_ignores_faces(tmp_path):
    assert read_vertices(_triangles_file(tmp_path)) == VERTICES


def test_read_vertices_without_face_element(tmp_path):
    text = "ply\nformat ascii 1.0\nelement vertex 4\nproperty float x\nend_header\n" + _vertex_lines()
    assert read_vertices(_write(tmp_path, text)) == VERTICES


def test_missing_face_element_is_an_error_for_meshes(tmp_path):
    text = "ply\nformat ascii 1.0\nelement vertex 4\nend_header\n" + _vertex_lines()
    with pytest.raises(PlyError, match="not found in header"):
        read(_write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(PlyError, match="cannot open"):
        read(tmp_path / "absent.ply")


def test_bad_magic(tmp_path):
    with pytest.raises(PlyError, match="does not start with 'ply'"):
        read(_write(tmp_path, "obj\nend_header\n"))


def test_empty_file(tmp_path):
    with pytest.raises(PlyError, match="does not start with 'ply'"):
        read(_write(tmp_path, ""))


def test_binary_format_rejected(tmp_path):
    text = HEADER.replace("ascii", "binary_little_endian").format(nv=4, nf=2)
    with pytest.raises(PlyError, match="binary_little_endian"):
        read(_write(tmp_path, text))


def test_face_before_vertex_rejected(tmp_path):
    text = "ply\nformat ascii 1.0\nelement face 1\nelement vertex 3\nend_header\n"
    with pytest.raises(PlyError, match="before 'element vertex'"):
        read(_write(tmp_path, text))


def test_zero_vertices_rejected(tmp_path):
    text = HEADER.format(nv=0, nf=1)
    with pytest.raises(PlyError, match="vertex count not found"):
        read(_write(tmp_path, text))


def test_zero_faces_rejected(tmp_path):
    text = HEADER.format(nv=4, nf=0) + _vertex_lines()
    with pytest.raises(PlyError, match="face count not found"):
        read(_write(tmp_path, text))


def test_index_out_of_range(tmp_path):
    text = HEADER.format(nv=4, nf=1) + _vertex_lines() + "3 0 1 4\n"
    with pytest.raises(PlyError, match="vertex index"):
        read(_write(tmp_path, text))


def test_truncated_vertex_list(tmp_path):
    text = HEADER.format(nv=4, nf=1) + _vertex_lines(VERTICES[:2])
    with pytest.raises(PlyError, match="vertex list"):
        read(_write(tmp_path, text))


def test_truncated_face_list(tmp_path):
    text = HEADER.format(nv=4, nf=2) + _vertex_lines() + "3 0 1 2\n"
    with pytest.raises(PlyError, match="face list"):
        read(_write(tmp_path, text))


def test_missing_end_header(tmp_path):
    with pytest.raises(PlyError, match="end_header"):
        read(_write(tmp_path, "ply\nformat ascii 1.0\nelement vertex 3\n"))


def test_invalid_number(tmp_path):
    text = HEADER.format(nv=4, nf=1) + "0 zero 0\n" + _vertex_lines(VERTICES[1:]) + "3 0 1 2\n"
    with pytest.raises(PlyError, match="zero"):
        read(_write(tmp_path, text))