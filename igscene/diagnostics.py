"""Error reporting helpers and OpenGL error-code and version utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass

GL_NO_ERROR = 0x0000
GL_INVALID_ENUM = 0x0500
GL_INVALID_VALUE = 0x0501
GL_INVALID_OPERATION = 0x0502
GL_OUT_OF_MEMORY = 0x0505

# code -> (symbolic name, description)
_GL_ERRORS: dict[int, tuple[str, str]] = {
    GL_NO_ERROR: (
        "GL_NO_ERROR",
        "Error when trying to report an error: no error has been recorded",
    ),
    GL_INVALID_ENUM: (
        "GL_INVALID_ENUM",
        "An unacceptable value is specified for an enumerated argument",
    ),
    GL_INVALID_VALUE: (
        "GL_INVALID_VALUE",
        "A numeric argument is out of range",
    ),
    GL_INVALID_OPERATION: (
        "GL_INVALID_OPERATION",
        "The specified operation is not allowed in the current state",
    ),
    GL_OUT_OF_MEMORY: (
        "GL_OUT_OF_MEMORY",
        "There is not enough memory left to execute the command",
    ),
}

_INVALID_CODE_DESCRIPTION = (
    "Error when trying to report an error: "
    "error code is not a valid error code for 'glGetError'"
)
_INVALID_CODE_NAME = "** invalid error code **"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ProgramError(Exception):
    """A fatal error detected at a known place in the program."""

    def __init__(self, message: str, filename: str, line: int) -> None:
        self.message = message
        self.filename = filename
        self.line = line
        super().__init__(
            f"error detected: {message} (file {filename}, line {line})"
        )


class GLStateError(ProgramError):
    """Raised when a graphics-library error code reports a failure."""

    def __init__(self, code: int, filename: str, line: int) -> None:
        self.code = code
        super().__init__(
            f"{error_code_name(code)}: {error_description(code)}",
            strip_path(filename),
            line,
        )


@dataclass(frozen=True, order=True)
class GLVersion:
    """A ``major.minor`` version number."""

    major: int
    minor: int

    def supports(self, min_major: int, min_minor: int) -> bool:
        """Return True when this version is at least ``min_major.min_minor``."""
        return (self.major, self.minor) >= (min_major, min_minor)


def error_description(code: int) -> str:
    """Return the description of an error code as reported by ``glGetError``."""
    entry = _GL_ERRORS.get(code)
    return entry[1] if entry else _INVALID_CODE_DESCRIPTION


def error_code_name(code: int) -> str:
    """Return the symbolic name of an error code."""
    entry = _GL_ERRORS.get(code)
    return entry[0] if entry else _INVALID_CODE_NAME


def check_gl_error(code: int, filename: str, line: int) -> None:
    """Raise :class:`GLStateError` unless ``code`` is ``GL_NO_ERROR``."""
    if code != GL_NO_ERROR:
        raise GLStateError(code, filename, line)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_version(text: str) -> GLVersion:
    """Parse the leading ``major.minor`` of a version string such as ``"4.6.0 vendor"``."""
    blank = text.find(" ")
    if blank == -1:
        blank = len(text)
    dot = text.find(".")
    if dot == -1:
        raise ValueError(f"no '.' found in version string {text!r}")
    if dot + 1 >= blank:
        raise ValueError(f"no minor version found in version string {text!r}")
    return GLVersion(_leading_int(text[:dot]), _leading_int(text[dot + 1 : blank]))


def strip_path(path: str) -> str:
    """Return the part of ``path`` after its last ``/``."""
    return path.rsplit("/", 1)[-1]