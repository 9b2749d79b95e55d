import pytest

from igscene.diagnostics import (
    GL_INVALID_ENUM,
    GL_INVALID_OPERATION,
    GL_INVALID_VALUE,
    GL_NO_ERROR,
    GL_OUT_OF_MEMORY,
    GLStateError,
    GLVersion,
    ProgramError,
    check_gl_error,
    error_code_name,
    error_description,
    parse_version,
    strip_path,
)


@pytest.mark.parametrize(
    "code, name",
    [
        (GL_NO_ERROR, "GL_NO_ERROR"),
        (GL_INVALID_ENUM, "GL_INVALID_ENUM"),
        (GL_INVALID_VALUE, "GL_INVALID_VALUE"),
        (GL_INVALID_OPERATION, "GL_INVALID_OPERATION"),
        (GL_OUT_OF_MEMORY, "GL_OUT_OF_MEMORY"),
    ],
)
def test_error_code_names(code, name):
    assert error_code_name(code) == name


def test_error_descriptions():
    assert error_description(GL_INVALID_VALUE) == "A numeric argument is out of range"
    assert (
        error_description(GL_OUT_OF_MEMORY)
        == "There is not enough memory left to execute the command"
    )


def test_unknown_code():
    assert error_code_name(0x1234) == "** invalid error code **"
    assert error_description(0x1234).endswith("is not a valid error code for 'glGetError'")


@pytest.mark.parametrize(
    "code", [GL_INVALID_ENUM, GL_INVALID_VALUE, GL_INVALID_OPERATION, GL_OUT_OF_MEMORY]
)
def test_check_gl_error_raises(code):
    with pytest.raises(GLStateError) as info:
        check_gl_error(code, "dir/sub/render.py", 42)
    err = info.value
    assert err.code == code
    assert err.filename == "render.py"
    assert err.line == 42
    assert error_code_name(code) in str(err)
    assert isinstance(err, ProgramError)


def test_program_error_attributes():
    err = ProgramError("bad thing", "main.py", 7)
    assert err.message == "bad thing"
    assert "main.py" in str(err)
    assert "7" in str(err)


def test_parse_version_with_vendor_text():
    assert parse_version("4.6.0 vendor 450") == GLVersion(4, 6)


def test_parse_version_plain():
    assert parse_version("3.30") == GLVersion(3, 30)


@pytest.mark.parametrize("text", ["46", "4. vendor", "4 vendor.1"])
def test_parse_version_errors(text):
    with pytest.raises(ValueError):
        parse_version(text)


def test_version_supports():
    version = GLVersion(3, 3)
    assert version.supports(3, 3)
    assert version.supports(2, 9)
    assert version.supports(3, 0)
    assert not version.supports(3, 4)
    assert not version.supports(4, 0)


def test_strip_path():
    assert strip_path("a/b/c.txt") == "c.txt"
    assert strip_path("plain.txt") == "plain.txt"
    assert strip_path("dir/") == ""