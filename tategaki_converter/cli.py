"""Command-line interface for the Tategaki Converter.

WHY: Users need a quick way to turn sentences into vertical text from
the terminal or a shell pipeline. The CLI wires together configuration,
the tokenizer, the converter, and the pluggable formatters behind a
single command.

HOW: Uses argparse. Sentences come from positional arguments, from
--input (one sentence per line, "-" for stdin), or from stdin when
neither is given. Layout defaults come from the environment (.env via
python-dotenv) and flags override them. The chosen formatter's content
goes to stdout, to an --output file, or into an --output directory as
{stem}{suffix}.

RULES:
- Status and errors go to stderr; converted text goes to stdout
- Blank input lines are skipped
- Separator flags accept backslash escapes ("\\n", "\\u3000")
- Output directory naming: {stem}{suffix}, numeric suffix on conflict
  (poem-vertical-2.txt); stem is the input file stem or "tategaki"
- Exit codes: 0 = success, 1 = any converter, configuration, or I/O error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tategaki_converter import config
from tategaki_converter.core.converter import VerticalWriter
from tategaki_converter.core.errors import TategakiError
from tategaki_converter.core.ir import Direction, VerticalOptions
from tategaki_converter.core.segmenter import Segmenter, make_boundary_predicate
from tategaki_converter.formatters import FORMATTERS
from tategaki_converter.formatters.base import FormatterOutput
from tategaki_converter.tokenizers import TOKENIZERS, BaseTokenizer, get_tokenizer

logger = logging.getLogger(__name__)

DEFAULT_STEM = "tategaki"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _read_sentences(args: argparse.Namespace) -> list[str]:
    """Collect input sentences from arguments, a file, or stdin.

    RULES:
    - Positional sentences win over --input
    - --input "-" and no input at all both read stdin
    - One sentence per line; blank lines are skipped
    """
    if args.sentences:
        return list(args.sentences)

    if args.input and args.input != "-":
        raw = Path(args.input).read_text(encoding="utf-8")
    else:
        raw = sys.stdin.read()

    return [line for line in raw.splitlines() if line.strip()]


def _build_options(args: argparse.Namespace) -> VerticalOptions:
    """Start from the environment defaults and apply CLI overrides."""
    options = config.load_options()
    changes = {}
    if args.direction:
        changes["direction"] = Direction.parse(args.direction)
    if args.column_separator is not None:
        changes["column_separator"] = config.decode_escapes(args.column_separator)
    if args.char_separator is not None:
        changes["char_separator"] = config.decode_escapes(args.char_separator)
    if args.row_terminator is not None:
        changes["row_terminator"] = config.decode_escapes(args.row_terminator)
    return options.replace(**changes) if changes else options


def _build_tokenizer(args: argparse.Namespace) -> BaseTokenizer:
    """Instantiate the tokenizer named by --tokenizer or the environment.

    SudachiPy itself is only imported on the first particle split.
    """
    key = args.tokenizer or config.load_tokenizer_name()
    if key == "sudachi":
        return get_tokenizer(
            key,
            split_mode=args.split_mode or config.load_split_mode(),
            dict_name=args.sudachi_dict or config.load_sudachi_dict(),
        )
    return get_tokenizer(key)


def _build_segmenter(args: argparse.Namespace) -> Segmenter:
    """Segmenter with the boundary flags applied over the environment defaults."""
    is_boundary = None
    if args.boundary_pos or args.boundary_match:
        is_boundary = make_boundary_predicate(
            args.boundary_pos or config.load_boundary_labels(),
            args.boundary_match or config.load_boundary_match(),
        )
    return Segmenter(tokenizer=_build_tokenizer(args), is_boundary=is_boundary)


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve an output file path, adding a numeric suffix on conflict.

    HOW: Try {stem}{suffix}. If it exists, insert a counter (starting at
    2) before the extension until a free name is found.

    Args:
        stem: Output filename stem.
        suffix: Formatter's suffix (e.g. "-vertical.txt").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # e.g. "-vertical.txt" → ("-vertical", ".txt")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _write_output(output: FormatterOutput, target: Path, stem: str) -> Path:
    """Save one formatter output to a file or into a directory."""
    path = _resolve_output_path(stem, output.suffix, target) if target.is_dir() else target
    path.write_text(output.content, encoding="utf-8")
    return path


def run(args: argparse.Namespace) -> int:
    """Execute one CLI invocation and return the exit code.

    Raises:
        TategakiError: For converter and configuration failures.
        OSError: For unreadable input or unwritable output.
    """
    sentences = _read_sentences(args)
    if not sentences:
        _status("Error: No sentences to convert")
        return 1

    options = _build_options(args)
    writer = VerticalWriter(segmenter=_build_segmenter(args), options=options)
    results = writer.convert_many(sentences)
    logger.info("Converted %d sentence(s)", len(results))

    formatter = FORMATTERS[args.format]()
    outputs = formatter.format(results)

    if args.output:
        stem = Path(args.input).stem if args.input and args.input != "-" else DEFAULT_STEM
        for output in outputs:
            path = _write_output(output, Path(args.output), stem)
            _status("Wrote {} sentence(s) ({}) to {}".format(
                len(results), formatter.name, path
            ))
    else:
        for output in outputs:
            sys.stdout.write(output.content)
        sys.stdout.flush()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separating parser construction from main() keeps the CLI testable.
    """
    parser = argparse.ArgumentParser(
        prog="tategaki",
        description="Convert horizontally written Japanese sentences into "
                    "vertical (tategaki) text.",
    )

    parser.add_argument(
        "sentences",
        nargs="*",
        help="Sentences to convert. Separate fields with a full-width space "
             "(U+3000) to choose the column breaks yourself.",
    )

    parser.add_argument(
        "-i", "--input",
        default=None,
        help="Read sentences from this file, one per line ('-' for stdin).",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write to this file, or into this directory as {stem}{suffix}. "
             "Default: stdout.",
    )

    parser.add_argument(
        "-f", "--format",
        default="plain_text",
        choices=sorted(FORMATTERS.keys()),
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "-d", "--direction",
        default=None,
        choices=[d.value for d in Direction],
        help="Column order (default: TATEGAKI_DIRECTION or rtl).",
    )

    parser.add_argument(
        "--column-separator",
        default=None,
        help="String after each character slot (default: full-width space).",
    )

    parser.add_argument(
        "--char-separator",
        default=None,
        help="String after each row terminator (default: empty).",
    )

    parser.add_argument(
        "--row-terminator",
        default=None,
        help="String ending each row (default: '\\n').",
    )

    parser.add_argument(
        "--tokenizer",
        default=None,
        choices=sorted(TOKENIZERS.keys()),
        help="Morphological analyzer for particle splitting "
             "(default: TATEGAKI_TOKENIZER or sudachi).",
    )

    parser.add_argument(
        "--split-mode",
        default=None,
        choices=["A", "B", "C"],
        help="Sudachi split mode (default: TATEGAKI_SUDACHI_SPLIT_MODE or C).",
    )

    parser.add_argument(
        "--sudachi-dict",
        default=None,
        help="Sudachi dictionary name, e.g. core, small, full.",
    )

    parser.add_argument(
        "--boundary-pos",
        action="append",
        default=None,
        help="Part-of-speech label that ends a phrase. Can be specified "
             "multiple times (default: 助詞).",
    )

    parser.add_argument(
        "--boundary-match",
        default=None,
        choices=list(config.BOUNDARY_MATCH_MODES),
        help="How --boundary-pos labels match a tag (default: substring).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits via sys.exit with the run() exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        code = run(args)
    except TategakiError as e:
        _status("Error: {}".format(e))
        code = 1
    except OSError as e:
        _status("Error: {}".format(e))
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
