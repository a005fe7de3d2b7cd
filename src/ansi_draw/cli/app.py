"""Typer CLI application: draw shapes from the command line."""

from typing import Annotated, Callable, Optional

import typer
from rich.console import Console
from rich.table import Table

from ansi_draw.attrs.style import Style
from ansi_draw.core.color import Color
from ansi_draw.core.config import DrawConfig
from ansi_draw.core.errors import AnsiDrawError
from ansi_draw.log import configure_logging
from ansi_draw.screen import Screen


def _parse_color(value: Optional[str]) -> Optional[Color]:
    """Parse ``N`` (palette index) or ``R,G,B`` (true color)."""
    if value is None:
        return None
    try:
        parts = [int(p) for p in value.split(",")]
        if len(parts) == 1:
            return Color.indexed(parts[0])
        if len(parts) == 3:
            return Color.from_rgb(*parts)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    raise typer.BadParameter(f"expected N or R,G,B, got {value!r}")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-draw",
        help="Draw lines, boxes and text on the terminal with ANSI escapes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)
    config = DrawConfig.from_env()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ) -> None:
        configure_logging("DEBUG" if verbose else config.log_level)

    def draw(
        action: Callable[[Screen], None],
        fg: Optional[str] = None,
        bg: Optional[str] = None,
        clear: bool = False,
    ) -> None:
        """Run ``action`` on a fresh stdout screen, then reset and flush."""
        screen = Screen(config=config)
        fg_color = _parse_color(fg)
        bg_color = _parse_color(bg)
        try:
            with screen.reset_guard():
                if clear:
                    screen.cursor.clear_all()
                if fg_color is not None:
                    screen.colors.push_fg(fg_color)
                if bg_color is not None:
                    screen.colors.push_bg(bg_color)
                action(screen)
        except AnsiDrawError as e:
            screen.flush()
            err_console.print(f"[red]Error:[/] {e}")
            raise typer.Exit(1)
        screen.println()
        screen.flush()

    FgOption = Annotated[Optional[str], typer.Option("--fg", help="Foreground: N or R,G,B")]
    BgOption = Annotated[Optional[str], typer.Option("--bg", help="Background: N or R,G,B")]
    CharOption = Annotated[str, typer.Option("--char", "-c", help="Character to draw with")]
    ClearOption = Annotated[bool, typer.Option("--clear/--no-clear", help="Clear the screen first")]

    @app.command()
    def line(
        x1: int, y1: int, x2: int, y2: int,
        char: CharOption = "*",
        fg: FgOption = None,
        bg: BgOption = None,
        clear: ClearOption = False,
    ) -> None:
        """Draw a line between two cells."""
        draw(lambda s: s.line(char, x1, y1, x2, y2), fg, bg, clear)

    @app.command()
    def rect(
        x1: int, y1: int, x2: int, y2: int,
        char: CharOption = "#",
        fill: Annotated[bool, typer.Option("--fill", "-f", help="Fill instead of outline")] = False,
        fg: FgOption = None,
        bg: BgOption = None,
        clear: ClearOption = False,
    ) -> None:
        """Draw a rectangle outline, or fill rows y1 to y2 with --fill."""
        if fill:
            draw(lambda s: s.rect_fill(char, x1, y1, x2, y2 + 1), fg, bg, clear)
        else:
            draw(lambda s: s.rect(char, x1, y1, x2, y2), fg, bg, clear)

    @app.command()
    def box(
        x1: int, y1: int, x2: int, y2: int,
        fg: FgOption = None,
        bg: BgOption = None,
        clear: ClearOption = False,
    ) -> None:
        """Draw a double-line box."""
        draw(lambda s: s.painter.ascii_box(x1, y1, x2, y2), fg, bg, clear)

    @app.command()
    def triangle(
        x1: int, y1: int, x2: int, y2: int, x3: int, y3: int,
        char: CharOption = "*",
        fg: FgOption = None,
        bg: BgOption = None,
        clear: ClearOption = False,
    ) -> None:
        """Draw a triangle outline."""
        draw(lambda s: s.triangle(char, x1, y1, x2, y2, x3, y3), fg, bg, clear)

    @app.command()
    def polygon(
        corners: Annotated[list[str], typer.Argument(help="Corners as X,Y; every edge must be straight")],
        char: CharOption = "#",
        fg: FgOption = None,
        bg: BgOption = None,
        clear: ClearOption = False,
    ) -> None:
        """Draw a closed outline of horizontal and vertical edges."""
        points: list[tuple[int, int]] = []
        for corner in corners:
            try:
                x, y = (int(p) for p in corner.split(","))
            except ValueError:
                raise typer.BadParameter(f"expected X,Y, got {corner!r}") from None
            points.append((x, y))
        draw(lambda s: s.painter.orth_polygon(char, points), fg, bg, clear)

    @app.command()
    def text(
        message: Annotated[str, typer.Argument(help="Text; \\n starts a new row")],
        x: Annotated[int, typer.Option("--x", help="Column")] = 0,
        y: Annotated[int, typer.Option("--y", help="Row")] = 0,
        bold: Annotated[bool, typer.Option("--bold", "-b")] = False,
        italic: Annotated[bool, typer.Option("--italic", "-i")] = False,
        underline: Annotated[bool, typer.Option("--underline", "-u")] = False,
        fg: FgOption = None,
        bg: BgOption = None,
        clear: ClearOption = False,
    ) -> None:
        """Draw text at a position."""
        body = message.replace("\\n", "\n")
        styles = [
            style for style, on in (
                (Style.BOLD, bold), (Style.ITALIC, italic), (Style.UNDERLINE, underline),
            ) if on
        ]

        def action(s: Screen) -> None:
            for style in styles:
                s.styles.enable(style)
            s.text(body, x, y)

        draw(action, fg, bg, clear)

    @app.command()
    def palette(
        true_color: Annotated[bool, typer.Option("--true-color", "-t", help="Show an RGB gradient")] = False,
    ) -> None:
        """Show the 256-color palette."""
        def action(s: Screen) -> None:
            if true_color:
                for i in range(64):
                    s.with_tc_bg(i * 4, 128, 255 - i * 4, lambda: s.emitter.write(" "))
                s.println()
                return
            for index in range(256):
                s.with_bg(index, lambda: s.emitter.write(f"{index:>4}"))
                if index % 16 == 15:
                    s.println()

        draw(action)

    @app.command()
    def styles() -> None:
        """Show every text style, including the shared bold/faint reset."""
        def action(s: Screen) -> None:
            for style in Style:
                s.with_style(style, lambda: s.emitter.write(style.value))
                s.println()
            s.with_bold(lambda: s.with_faint(lambda: s.emitter.write("bold, then faint")))
            s.println()

        draw(action)

    @app.command()
    def demo(
        clear: ClearOption = True,
    ) -> None:
        """Draw a small scene with every shape."""
        def action(s: Screen) -> None:
            s.with_fg(Color.CYAN, lambda: s.painter.ascii_box(0, 0, 39, 14))
            s.with_fg(Color.YELLOW, lambda: s.line('*', 2, 2, 20, 12))
            s.with_fg(Color.GREEN, lambda: s.triangle('+', 24, 12, 31, 3, 37, 12))
            s.with_bg(Color.BLUE, lambda: s.rect_fill(' ', 4, 9, 12, 12))
            s.painter.ascii_box_chars("r--v--7\n|  |  |\nL--^--J", 24, 1)
            s.with_bold(lambda: s.text("ansi-draw", 2, 1))
            s.cursor.pos(0, 15)

        draw(action, clear=clear)

    @app.command()
    def info() -> None:
        """Show terminal size and active settings."""
        size = Screen(config=config).terminal.size_or()
        table = Table(title="ansi-draw")
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        table.add_row("columns", str(size.cols))
        table.add_row("rows", str(size.rows))
        table.add_row("bottom row", str(config.bottom_row))
        table.add_row("auto flush", str(config.auto_flush))
        table.add_row("log level", config.log_level)
        Console().print(table)

    return app
