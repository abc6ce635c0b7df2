"""pxtext CLI — render text as pixel-art rows."""

import argparse
import sys

from pxtext.glyphs import GLYPHS
from pxtext.logging import audit, get_logger, setup_logging
from pxtext.renderer import (
    MAX_TEXT_LENGTH,
    CharacterNotFound,
    EmptyText,
    PixelArtError,
    TextTooLong,
    render,
    render_lossy,
    validate,
)

log = get_logger("cli")

PROMPT = "Enter your text input: "


def describe_error(exc: PixelArtError) -> str:
    """User-facing message for each kind of render failure."""
    if isinstance(exc, CharacterNotFound):
        return (f"Error: Character '{exc.char}' is not supported by the font.\n"
                "Supported characters: A-Z, a-z, and space")
    if isinstance(exc, TextTooLong):
        return (f"Error: Text is too long ({exc.length} characters). "
                f"Maximum length is {exc.limit} characters.")
    if isinstance(exc, EmptyText):
        return "Error: No text entered. Type at least one letter or space."
    return f"Error: {exc}"


def _print_rows(rows: list[str], on: str | None = None, off: str | None = None):
    if on is None and off is None:
        for row in rows:
            print(row)
        return
    from pxtext.export import to_text
    print(to_text(rows, on=on or "1", off=off or "0"))


def cmd_interactive(args):
    """Prompt for one line of text and print its rows."""
    print(PROMPT, end="", flush=True)
    line = sys.stdin.readline()
    text = line.strip()

    try:
        rows = render(text, max_length=args.max_length)
    except PixelArtError as exc:
        print(describe_error(exc), file=sys.stderr)
        return

    print("\noutput:")
    _print_rows(rows)


def cmd_render(args):
    """Render TEXT, optionally writing a PNG."""
    fn = render_lossy if args.lossy else render
    try:
        rows = fn(args.text, max_length=args.max_length)
    except PixelArtError as exc:
        print(describe_error(exc), file=sys.stderr)
        return

    _print_rows(rows, args.on, args.off)

    if args.output:
        from pxtext.export import save_png

        img = save_png(rows, args.output, scale=args.scale)
        print(f"Saved: {args.output} ({img.size[0]}x{img.size[1]})")


def cmd_validate(args):
    """Check that TEXT can be rendered."""
    try:
        validate(args.text, max_length=args.max_length)
    except PixelArtError as exc:
        print(describe_error(exc), file=sys.stderr)
        sys.exit(1)
    print("OK")


def cmd_chars(args):
    """List supported characters and their widths."""
    for ch in GLYPHS.supported_chars():
        label = "space" if ch == " " else ch
        print(f"  {label:5s} width={GLYPHS.lookup(ch).width}")
    print(f"{len(GLYPHS)} characters")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="pxtext", description="Render text as 5-row pixel art")

    # Global logging flags
    parser.add_argument("-V", "--verbose", action="store_true", help="Enable DEBUG-level logging")
    parser.add_argument("--log-file", default=None, help="Write JSON logs to file")
    parser.add_argument("--json-logs", action="store_true", help="Use JSON log format on the console")
    parser.add_argument("--max-length", type=int, default=MAX_TEXT_LENGTH,
                        help="Maximum number of characters accepted")

    # --max-length after the subcommand; omitted means the top-level value
    limits = argparse.ArgumentParser(add_help=False)
    limits.add_argument("--max-length", type=int, default=argparse.SUPPRESS,
                        help="Maximum number of characters accepted")

    subparsers = parser.add_subparsers(dest="command", help="Available commands (default: interactive prompt)")

    # --- render ---
    p_render = subparsers.add_parser("render", parents=[limits], help="Render text to rows of 0/1")
    p_render.add_argument("text", help="Text to render (A-Z, a-z, space)")
    p_render.add_argument("--lossy", action="store_true", help="Render unsupported characters as blank space")
    p_render.add_argument("--on", default=None, help="Character to print for lit pixels")
    p_render.add_argument("--off", default=None, help="Character to print for blank pixels")
    p_render.add_argument("-o", "--output", default=None, help="Also write a PNG image to this path")
    p_render.add_argument("--scale", type=int, default=10, help="PNG pixel size")

    # --- validate ---
    p_val = subparsers.add_parser("validate", parents=[limits], help="Check whether text can be rendered")
    p_val.add_argument("text", help="Text to check")

    # --- chars ---
    subparsers.add_parser("chars", help="List supported characters")

    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else "INFO"
    setup_logging(level=level, log_file=args.log_file, json_format=args.json_logs)
    audit("cli.start", logger=log, command=args.command or "interactive", verbose=args.verbose)

    commands = {
        None: cmd_interactive,
        "render": cmd_render,
        "validate": cmd_validate,
        "chars": cmd_chars,
    }
    commands[args.command](args)
    audit("cli.done", logger=log, command=args.command or "interactive")


if __name__ == "__main__":
    main()
