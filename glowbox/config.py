"""Window settings, command-line options and OpenGL error names."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn

WINDOW_WIDTH = 1366
WINDOW_HEIGHT = 768
WINDOW_TITLE = "Glowbox"
WINDOW_RESIZABLE = False
WINDOW_SAMPLES = 4

GL_NO_ERROR = 0
GL_INVALID_ENUM = 0x0500
GL_INVALID_VALUE = 0x0501
GL_INVALID_OPERATION = 0x0502
GL_STACK_OVERFLOW = 0x0503
GL_STACK_UNDERFLOW = 0x0504
GL_OUT_OF_MEMORY = 0x0505
GL_INVALID_FRAMEBUFFER_OPERATION = 0x0506

_GL_ERROR_NAMES = {
    GL_INVALID_ENUM: "GL_INVALID_ENUM",
    GL_INVALID_OPERATION: "GL_INVALID_OPERATION",
    GL_INVALID_FRAMEBUFFER_OPERATION: "GL_INVALID_FRAMEBUFFER_OPERATION",
    GL_OUT_OF_MEMORY: "GL_OUT_OF_MEMORY",
    GL_STACK_UNDERFLOW: "GL_STACK_UNDERFLOW",
    GL_STACK_OVERFLOW: "GL_STACK_OVERFLOW",
}

UNKNOWN_GL_ERROR = "[Unknown error ID]"


@dataclass(frozen=True)
class CommandLineOptions:
    """Options chosen on the command line."""

    enable_autoplay: bool = False


def gl_error_name(error_id: int) -> str | None:
    """Name of an OpenGL error code, or None when there is no error."""
    if error_id == GL_NO_ERROR:
        return None
    return _GL_ERROR_NAMES.get(error_id, UNKNOWN_GL_ERROR)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        sys.stderr.write(f"Error parsing arguments: {message}\n")
        self.print_usage(sys.stderr)
        raise SystemExit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="glowbox", description="Small breakout like juggling game")
    parser.add_argument(
        "-a",
        "--autoplay",
        action="store_true",
        help="Let the game play itself automatically. Useful for testing.",
    )
    return parser


def parse_options(argv: Sequence[str] | None = None) -> CommandLineOptions:
    """Parse command-line arguments; exits with status 1 on invalid input."""
    namespace = _build_parser().parse_args(argv)
    return CommandLineOptions(enable_autoplay=namespace.autoplay)