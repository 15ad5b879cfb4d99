"""Interactive command shell driving the matcher and renderer.

Commands::

    chars                         list the active characters
    add|remove <c|a-z|all|space>  change the active characters
    res [up|down]                 show, double or halve the resolution
    round abs|down|up             choose how brightness is rounded to a character
    output console|html           choose where asciiArt writes
    asciiArt                      render the image
    exit                          leave the shell
"""

import logging
from collections.abc import Iterable, Iterator

from asciishade.cache import BrightnessCache
from asciishade.charsets import ASCII_PRINTABLE, char_range, is_printable
from asciishade.config import (
    DEFAULT_CHARSET,
    DEFAULT_RESOLUTION,
    EXIT_COMMAND,
    HTML_FONT,
    HTML_OUTPUT_PATH,
    MIN_CHARSET_SIZE,
    PROMPT,
)
from asciishade.errors import (
    CharsetFormatError,
    CharsetTooSmallError,
    IllegalCommandError,
    OutputFormatError,
    ResolutionFormatError,
    ResolutionRangeError,
    RoundFormatError,
    ShellError,
)
from asciishade.geometry import resolution_bounds
from asciishade.glyph_atlas import GlyphSource
from asciishade.image import RasterImage
from asciishade.matcher import BrightnessMatcher, ComparisonMode
from asciishade.output import AsciiOutput, ConsoleOutput, HtmlOutput
from asciishade.pipeline import AsciiArtRenderer

logger = logging.getLogger(__name__)


def _prompt_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def _parse_chars(arg: str, adding: bool) -> str:
    """Characters named by an add/remove argument."""
    if arg == "all":
        return ASCII_PRINTABLE
    if arg == "space":
        return " "
    if arg != "-" and "-" in arg:
        parts = arg.split("-")
        if len(parts) != 2 or not all(is_printable(part) for part in parts):
            raise CharsetFormatError(adding)
        return char_range(*parts)
    if not is_printable(arg):
        raise CharsetFormatError(adding)
    return arg


class Shell:
    def __init__(
        self,
        image: RasterImage,
        matcher: BrightnessMatcher | None = None,
        *,
        glyphs: GlyphSource | None = None,
        charset: str = DEFAULT_CHARSET,
        resolution: int = DEFAULT_RESOLUTION,
        mode: ComparisonMode = ComparisonMode.CLOSEST_ABSOLUTE,
        output: AsciiOutput | None = None,
        cache: BrightnessCache | None = None,
        html_path: str = HTML_OUTPUT_PATH,
        html_font: str = HTML_FONT,
    ):
        self.image = image
        self.matcher = matcher if matcher is not None else BrightnessMatcher(charset, glyphs=glyphs)
        self.renderer = AsciiArtRenderer(self.matcher, cache)
        self.resolution = self._check_resolution(resolution)
        self.mode = mode
        self.output = output if output is not None else ConsoleOutput()
        self.html_path = html_path
        self.html_font = html_font
        self._commands = {
            "chars": self._chars,
            "add": self._add,
            "remove": self._remove,
            "res": self._res,
            "round": self._round,
            "output": self._output,
            "asciiArt": self._ascii_art,
        }

    def run(self, lines: Iterable[str] | None = None) -> None:
        """Execute commands until ``exit`` or end of input.

        Reads from stdin with a prompt when ``lines`` is None. Failed commands
        print their message and the loop carries on.
        """
        if lines is None:
            lines = _prompt_lines(PROMPT)
        for line in lines:
            if line.strip() == EXIT_COMMAND:
                break
            try:
                self.execute(line)
            except ShellError as e:
                logger.debug("Command %r failed: %s", line, type(e).__name__)
                print(e.message)

    def execute(self, line: str) -> None:
        words = line.split()
        if not words or words[0] not in self._commands:
            raise IllegalCommandError()
        self._commands[words[0]](words[1:])

    def _chars(self, args: list[str]) -> None:
        print(" ".join(self.matcher.charset))

    def _add(self, args: list[str]) -> None:
        if len(args) != 1:
            raise CharsetFormatError(adding=True)
        for char in _parse_chars(args[0], adding=True):
            self.matcher.add_char(char)

    def _remove(self, args: list[str]) -> None:
        if len(args) != 1:
            raise CharsetFormatError(adding=False)
        for char in _parse_chars(args[0], adding=False):
            self.matcher.remove_char(char)

    def _res(self, args: list[str]) -> None:
        if not args:
            print(f"Resolution set to {self.resolution}")
            return
        if args == ["up"]:
            resolution = self.resolution * 2
        elif args == ["down"]:
            resolution = self.resolution // 2
        else:
            raise ResolutionFormatError()

        self.resolution = self._check_resolution(resolution)

    def _check_resolution(self, resolution: int) -> int:
        low, high = resolution_bounds(self.image, self.renderer.symmetric)
        if not low <= resolution <= high:
            raise ResolutionRangeError()
        return resolution

    def _round(self, args: list[str]) -> None:
        try:
            (word,) = args
            self.mode = ComparisonMode(word)
        except ValueError:
            raise RoundFormatError() from None

    def _output(self, args: list[str]) -> None:
        if args == ["console"]:
            if not isinstance(self.output, ConsoleOutput):
                self.output = ConsoleOutput()
        elif args == ["html"]:
            if not isinstance(self.output, HtmlOutput):
                self.output = HtmlOutput(self.html_path, self.html_font)
        else:
            raise OutputFormatError()

    def _ascii_art(self, args: list[str]) -> None:
        if len(self.matcher) < MIN_CHARSET_SIZE:
            raise CharsetTooSmallError()
        grid = self.renderer.render(self.image, self.resolution, self.mode)
        self.output.out(grid)
