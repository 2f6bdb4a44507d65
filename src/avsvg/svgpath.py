"""Handling Paths for SVG: parse, absolutize and normalize path data"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from avsvg.arc import ArcConverter
from avsvg.command import AvCommand
from avsvg.common import CommandKind, MalformedCommandError, format_number
from avsvg.consts import SVG_CHUNK_SPLIT
from avsvg.geom import GeomMath

logger = logging.getLogger(__name__)

_CHUNK_SPLIT_RE = re.compile(SVG_CHUNK_SPLIT)

Point = Tuple[float, float]


class AvSvgPath:
    """
    This class provides a collection of static methods for processing SVG path data.
    A SVG path is characterized by a string describing a sequence of commands,
    each command letter followed by its coordinates.
    Commands (command : number of values : command-character):
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc   4: Ss
        QuadraticBezier:  4: Qq   2: Tt
        ArcCurve:         7: Aa
        ClosePath:        0: Zz

    The processing is a pipeline of three stages:
        parse()      -- path string   -> initial commands (as written, relative or absolute)
        absolutize() -- commands      -> commands with absolute coordinates only (uppercase)
        normalize()  -- absolute cmds -> only MoveTo 'M' and cubic Bezier 'C' commands
    """

    @staticmethod
    def parse(path_string: str) -> List[AvCommand]:
        """
        Split the given _path_string_ into its commands.
        Repeated coordinates after one command letter create one command per coordinate set,
        e.g. "L10,10 20,20" results in two LineTo commands.

        Args:
            path_string (str): a SVG path string

        Returns:
            List[AvCommand]: the commands in the order of the path string

        Raises:
            MalformedCommandError: if a command letter is unknown or the number of
                coordinates does not fit the command.
        """
        commands: List[AvCommand] = []

        for chunk in _CHUNK_SPLIT_RE.split(path_string):
            text = chunk.strip()
            if not text:
                continue

            command_letter = text[0]
            kind = CommandKind.from_letter(command_letter)

            # ClosePath has no coordinates; anything following is ignored
            if kind is CommandKind.CLOSE_PATH:
                commands.append(AvCommand(command_letter, ()))
                continue

            args = AvCommand.parse_numbers(text[1:])
            batch_size = kind.arity
            if not args or len(args) % batch_size:
                raise MalformedCommandError(
                    f"Command with type: {command_letter}, does not match the expected number of "
                    f"parameters: {batch_size} (got {len(args)})"
                )

            for i in range(0, len(args), batch_size):
                commands.append(AvCommand(command_letter, args[i : i + batch_size]))

        logger.debug("Parsed %d command(s) from path data of length %d", len(commands), len(path_string))
        return commands

    @staticmethod
    def absolutize(commands: Sequence[AvCommand]) -> List[AvCommand]:
        """
        Convert relative commands (lowercase letter) into absolute ones (uppercase letter).
        The representation (i.e. geometry) of the path stays the same.
        Absolute commands are passed through unchanged, so the function is idempotent.

        Args:
            commands (Sequence[AvCommand]): commands, relative and/or absolute

        Returns:
            List[AvCommand]: new commands using absolute coordinates only
        """
        ret_commands: List[AvCommand] = []
        # current point and first point of the current subpath
        cursor_x, cursor_y = 0.0, 0.0
        start_x, start_y = 0.0, 0.0

        for command in commands:
            kind = command.kind
            coordinates = list(command.coordinates)

            if command.is_relative:
                if kind is CommandKind.ELLIPTICAL_ARC:
                    # only the end point is relative, radii/rotation/flags are not
                    coordinates[5] += cursor_x
                    coordinates[6] += cursor_y
                elif kind is CommandKind.HORIZONTAL_LINE_TO:
                    coordinates[0] += cursor_x
                elif kind is CommandKind.VERTICAL_LINE_TO:
                    coordinates[0] += cursor_y
                else:
                    for i in range(0, len(coordinates), 2):
                        coordinates[i] += cursor_x
                        coordinates[i + 1] += cursor_y

            new_command = AvCommand(kind.absolute, tuple(coordinates))

            # update cursor state
            if kind is CommandKind.CLOSE_PATH:
                cursor_x, cursor_y = start_x, start_y
            elif kind is CommandKind.HORIZONTAL_LINE_TO:
                cursor_x = coordinates[0]
            elif kind is CommandKind.VERTICAL_LINE_TO:
                cursor_y = coordinates[0]
            elif kind is CommandKind.MOVE_TO:
                cursor_x, cursor_y = coordinates[0], coordinates[1]
                start_x, start_y = cursor_x, cursor_y
            else:
                cursor_x, cursor_y = coordinates[-2], coordinates[-1]

            ret_commands.append(new_command)

        return ret_commands

    @staticmethod
    def iter_normalized(commands: Sequence[AvCommand]) -> Iterator[Tuple[AvCommand, List[AvCommand]]]:
        """
        Normalize absolute _commands_ one by one.

        Yields:
            Tuple[AvCommand, List[AvCommand]]: each input command together with the
                normalized commands (M or C) it was lowered to. The list is empty
                for degenerate arcs.
        """
        # pylint: disable=too-many-locals,too-many-branches,too-many-statements
        cursor: Point = (0.0, 0.0)  # end point of the last emitted command
        start: Point = (0.0, 0.0)  # first point of the current subpath
        cubic_control: Point = (0.0, 0.0)  # control point 2 of the last emitted command
        quad_control: Point = (0.0, 0.0)  # control point of the last quadratic (Q, T)
        previous_kind: Optional[CommandKind] = None

        for command in commands:
            if command.is_relative:
                raise ValueError(f"normalize() expects absolute commands, got '{command.type}' (absolutize first)")

            kind = command.kind
            c = command.coordinates
            emitted: List[AvCommand]

            if kind is CommandKind.MOVE_TO:
                start = (c[0], c[1])
                emitted = [AvCommand("M", (c[0], c[1]))]

            elif kind is CommandKind.ELLIPTICAL_ARC:
                curves = ArcConverter.arc_to_curves(
                    cursor[0], cursor[1], c[5], c[6], c[3], c[4], c[0], c[1], c[2]
                )
                if not curves:
                    # degenerate arc: contributes nothing, state stays unchanged
                    yield command, []
                    continue
                emitted = [AvCommand("C", curve[2:]) for curve in curves]

            elif kind is CommandKind.SMOOTH_CURVE_TO:
                control1 = cursor
                if previous_kind in (CommandKind.CURVE_TO, CommandKind.SMOOTH_CURVE_TO):
                    control1 = GeomMath.reflect_point(cubic_control, cursor)
                emitted = [AvCommand.from_coordinates("C", control1[0], control1[1], *c)]

            elif kind is CommandKind.SMOOTH_QUADRATIC_TO:
                if previous_kind in (CommandKind.QUADRATIC_TO, CommandKind.SMOOTH_QUADRATIC_TO):
                    quad_control = GeomMath.reflect_point(quad_control, cursor)
                else:
                    quad_control = cursor
                emitted = [AvCommand.from_quadratic(cursor[0], cursor[1], quad_control[0], quad_control[1], c[0], c[1])]

            elif kind is CommandKind.QUADRATIC_TO:
                quad_control = (c[0], c[1])
                emitted = [AvCommand.from_quadratic(cursor[0], cursor[1], c[0], c[1], c[2], c[3])]

            elif kind is CommandKind.LINE_TO:
                emitted = [AvCommand.from_line(cursor[0], cursor[1], c[0], c[1])]

            elif kind is CommandKind.HORIZONTAL_LINE_TO:
                emitted = [AvCommand.from_line(cursor[0], cursor[1], c[0], cursor[1])]

            elif kind is CommandKind.VERTICAL_LINE_TO:
                emitted = [AvCommand.from_line(cursor[0], cursor[1], cursor[0], c[0])]

            elif kind is CommandKind.CLOSE_PATH:
                emitted = [AvCommand.from_line(cursor[0], cursor[1], start[0], start[1])]

            else:  # CommandKind.CURVE_TO
                emitted = [AvCommand("C", c)]

            # update states for the next command
            previous_kind = kind
            last = emitted[-1].coordinates
            cursor = (last[-2], last[-1])
            cubic_control = (last[-4], last[-3]) if len(last) >= 4 else cursor

            yield command, emitted

    @staticmethod
    def normalize(commands: Sequence[AvCommand]) -> List[AvCommand]:
        """
        Convert absolute _commands_ into MoveTo 'M' and cubic Bezier 'C' commands only,
        which can be drawn by any renderer supporting moveTo() and cubicTo().
            L, H, V, Z -> C (straight line as cubic)
            Q, T       -> C (degree elevation)
            S          -> C (reflected control point)
            A          -> C (1..n cubic segments, none for degenerate arcs)

        Args:
            commands (Sequence[AvCommand]): absolute commands (see absolutize())

        Returns:
            List[AvCommand]: the normalized commands
        """
        ret_commands: List[AvCommand] = []
        for _, emitted in AvSvgPath.iter_normalized(commands):
            ret_commands.extend(emitted)
        logger.debug("Normalized %d command(s) into %d command(s)", len(commands), len(ret_commands))
        return ret_commands

    @staticmethod
    def to_path_string(commands: Sequence[AvCommand], round_func: Optional[Callable] = None) -> str:
        """
        Serialize _commands_ into a SVG path string.
        Each point of the path is rounded by using the given _round_func_.
        Each value is written with the shortest text that reads back to the same float.

        Args:
            commands (Sequence[AvCommand]): the commands to serialize
            round_func (Optional[Callable], optional):
                a function that takes a float and returns a float. Defaults to None.

        Returns:
            str: the path string, e.g. "M2 2 C2 2 8 8 8 8"
        """
        ret_commands = []
        for command in commands:
            args = [
                format_number(round_func(value) if round_func else value) for value in command.coordinates
            ]
            ret_commands.append(command.type + " ".join(args))
        return " ".join(ret_commands)

    @staticmethod
    def beautify_commands(path_string: str, round_func: Optional[Callable] = None) -> str:
        """
        Takes the given _path_string_ and rounds (mathematical) each point of the path
            by using the given _round_func_. One command letter is written per coordinate set.

        Args:
            path_string (str): a SVG path string
            round_func (Optional[Callable], optional):
                a function that takes a float and returns a float. Defaults to None.

        Returns:
            str: the beautified path_string
        """
        return AvSvgPath.to_path_string(AvSvgPath.parse(path_string), round_func)
