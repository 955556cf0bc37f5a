"""Command-line interface for the Reabank LSB Numberer.

WHY: Users maintain their Reabank files by hand in a text editor and want
one command that renumbers the file in place. The CLI wires file reading,
the numbering core, file writing and the optional mapping printout behind
that single command.

HOW: Uses argparse to accept the input path, an optional output path and
the policy flags. The file is read as text with newline translation off,
handed to ReabankNumberer, and the result is written back (or printed).
Status messages go to stderr; stdout only ever carries the Reabank file
(--print) or the LSB mapping (--show).

RULES:
- Positional: inputfile (``-`` reads stdin), optional outputfile
- Output defaults to the input path; stdin input without an output path
  prints the result instead
- -?/-h/--help prints the full usage and exits 0
- Missing path prints an error and the basic usage, exits 1
- Read/write errors print ``Error: ...`` to stderr and exit 1
- --verbose is ignored when printing the file to stdout
- --show only applies when the file was written, not printed
- When the file is written to stdout (``-``), the mapping follows it
  after a newline
- CRLF line endings survive the round trip unchanged
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from reabank_numberer.config import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAINTAIN,
    DEFAULT_RESET,
    DEFAULT_SHOW_FORMAT,
    SHOW_FORMATS,
)
from reabank_numberer.core.numberer import ReabankNumberer
from reabank_numberer.formatters import FORMATTERS

PROG = "reabank-numberer"

STDIO_PATH = "-"

BASIC_USAGE = """{prog} - uniquely numbers Reaticulate LSBs

Usage: {prog} [flags...] inputfile [outputfile]

  inputfile       path to input Reabank file. - reads from stdin
  [outputfile]    optional. path to output Reabank file. defaults to input path

Flags:

  [-?|-h|--help]  displays full usage instructions
  [-m|--maintain] maintains all existing articulation LSBs not numbered 0
  [-p|--print]    prints output instead of writing Reabank file
  [-r|--reset]    renumbers all LSB definitions, even if they aren't set to 0
  [-s|--show]     prints LSB/articulation pairs after processing
  [--show-format {{tsv,json}}]
                  format of the LSB/articulation pairs. defaults to tsv
  [-v|--verbose]  prints more details during processing. ignored if using -p|--print"""

DETAILED_USAGE = """
== OVERVIEW

This tool uniquely numbers LSBs for articulation definitions in a Reabank file.
This is useful if you have a list of articulations for a library which you want to
use with Reaticulate and the articulations do not cleanly map to a standard such
as UACC.

LSBs are numbered by going through each articulation that is defined in the
Reabank file in order of appearance, and assigning an increasing numerical ID.

For example, if you run

  {prog} Reaticulate.reabank

and Reaticulate.reabank looks like

  //! g="Orchestral Tools/Berlin Strings" n="01. Violins I Basic"
  //! m="Use corresponding Kontakt multi"
  Bank 1 1 OT-BS - Violins I Basic
  //! c=legato i=legato o=@2
  32 Legato
  //! c=legato i=legato o=@3
  2 Legato Fingered
  //! c=long i=note-half o=@4
  15 Sustains Immediate
  //! c=long i=accented-half o=@5
  8 Sustains Accented
  //! c=long i=note-whole o=@6
  4 Sustains Soft

then the articulations are renumbered starting from 1, and the resulting file will
look much the same, but with the relevant lines defining the LSBs for articulations
instead renumbered to

  1 Legato
  2 Legato Fingered
  3 Sustains Immediate
  4 Sustains Accented
  5 Sustains Soft

Using this example, if the Reabank file later contains any entries for any
instrument with an articulation named "Sustains Immediate", then that
articulation's number would also be changed to 3. This way, you can easily use
recordings or MIDI clips from one instrument in another so long as they both support
an articulation with the same name.

If you use the -m|--maintain flag, then no LSBs are renumbered unless they are set
to 0. This way, you can add and number additional articulations without changing
the LSBs of any articulations that are already in use in your projects.

== LSB DEFINITIONS

You can define all the LSBs together in one place using "//def-lsb" lines:

  //def-lsb 1 Legato
  //def-lsb 2 Legato Fingered
  //def-lsb 3 Legato Ostinato Arp
  //def-lsb 4 Sustains Immediate
  //def-lsb 5 Sustains Accented

All LSB definitions in the Reabank file are read first before any articulations
are numbered, regardless of where the definitions are located in the file.

You can also have LSB numbers in definitions initialized by using "//def-lsb"
lines set to 0. For example, you could first write

  //def-lsb 0 Legato
  //def-lsb 0 Legato Fingered
  //def-lsb 4 Legato Ostinato Arp
  //def-lsb 5 Sustains Immediate
  //def-lsb 0 Sustains Accented

and then run {prog} on that Reabank file, after which the definitions, as well
as any articulations in the file using those same articulation names, would be
numbered as follows:

  //def-lsb 1 Legato
  //def-lsb 2 Legato Fingered
  //def-lsb 4 Legato Ostinato Arp
  //def-lsb 5 Sustains Immediate
  //def-lsb 3 Sustains Accented

If you would like to renumber all your LSB definitions, even if they aren't set
to 0, then use the -r|--reset flag.

== ENVIRONMENT

Defaults can be set in the environment or in a .env file:

  REABANK_MAINTAIN=true       behave as if -m|--maintain was given
  REABANK_RESET=true          behave as if -r|--reset was given
  REABANK_SHOW_FORMAT=json    default for --show-format
  REABANK_ENCODING=utf-8      encoding of Reabank files
  REABANK_LOG_LEVEL=WARNING   level of conflict warnings and other log messages
"""


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: stdout may carry the Reabank file itself (--print), so progress
    messages must not end up there.
    """
    print(msg, file=sys.stderr, flush=True)


def _print_usage(full: bool = False, file=None) -> None:
    out = file if file is not None else sys.stdout
    print(BASIC_USAGE.format(prog=PROG), file=out)
    if full:
        print(DETAILED_USAGE.format(prog=PROG), file=out)


def _configure_logging() -> None:
    """Send log records (conflict warnings included) to stderr."""
    level = getattr(logging, DEFAULT_LOG_LEVEL, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def _read_input(path: str) -> str:
    """Read the Reabank file without translating line endings.

    RULES:
    - ``-`` reads stdin; bytes are decoded directly when stdin has a
      binary buffer so ``\\r\\n`` survives
    - Files are opened with newline="" for the same reason
    """
    if path == STDIO_PATH:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is not None:
            return buffer.read().decode(DEFAULT_ENCODING)
        return sys.stdin.read()
    with open(path, "r", encoding=DEFAULT_ENCODING, newline="") as f:
        return f.read()


def _write_output(path: str, content: str) -> None:
    if path == STDIO_PATH:
        sys.stdout.write(content)
        sys.stdout.flush()
        return
    with open(path, "w", encoding=DEFAULT_ENCODING, newline="") as f:
        f.write(content)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without touching files.

    RULES:
    - argparse's own help is disabled; -?/-h/--help print the full usage
    - Both positionals are optional so a missing path gets the tool's own
      error message instead of argparse's
    - Policy flags default to the values from config
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Uniquely numbers Reaticulate LSBs in a Reabank file.",
        add_help=False,
    )

    parser.add_argument(
        "-?", "-h", "--help",
        dest="help",
        action="store_true",
        help="Display full usage instructions.",
    )

    parser.add_argument(
        "-m", "--maintain",
        action="store_true",
        default=DEFAULT_MAINTAIN,
        help="Maintain all existing articulation LSBs not numbered 0.",
    )

    parser.add_argument(
        "-p", "--print",
        dest="print_output",
        action="store_true",
        help="Print output instead of writing the Reabank file.",
    )

    parser.add_argument(
        "-r", "--reset",
        action="store_true",
        default=DEFAULT_RESET,
        help="Renumber all LSB definitions, even if they aren't set to 0.",
    )

    parser.add_argument(
        "-s", "--show",
        action="store_true",
        help="Print LSB/articulation pairs after processing.",
    )

    parser.add_argument(
        "--show-format",
        default=DEFAULT_SHOW_FORMAT,
        choices=SHOW_FORMATS,
        help="Format of the LSB/articulation pairs (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print more details during processing. Ignored with --print.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to the input Reabank file, or - for stdin.",
    )

    parser.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="Path to the output Reabank file (default: input path).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    WHY: This is the function that __main__.py and the ``reabank-numberer``
    console script call.

    HOW: Parses arguments, reads the file, numbers it, then writes or
    prints the result and optionally the LSB mapping.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        _print_usage(full=True)
        return 0

    _configure_logging()

    if not args.input_file:
        print("Error: Path not given.", file=sys.stderr)
        _print_usage(file=sys.stderr)
        return 1

    if args.show_format not in FORMATTERS:
        print(
            "Error: Unknown show format '{}'. Available formats: {}".format(
                args.show_format, ", ".join(sorted(FORMATTERS.keys()))
            ),
            file=sys.stderr,
        )
        return 1

    input_path = args.input_file
    output_path = args.output_file or input_path
    print_output = args.print_output or (
        input_path == STDIO_PATH and args.output_file is None
    )
    verbose = args.verbose and not print_output

    def log_verbose(*data: object) -> None:
        if verbose:
            _status(" ".join(str(d) for d in data))

    log_verbose("Reading Reabank file...")
    try:
        data = _read_input(input_path)
    except (OSError, UnicodeDecodeError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    numberer = ReabankNumberer(data, verbose, log_verbose)
    numberer.number_lsbs(args.maintain, args.reset)
    output = numberer.output()

    if print_output:
        print(output)
        return 0

    log_verbose("Writing file...")
    try:
        _write_output(output_path, output)
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    log_verbose("Updated Reabank file written to {}.".format(output_path))

    if args.show:
        if output_path == STDIO_PATH:
            # Start the mapping on its own line after the file on stdout
            print()
        formatter = FORMATTERS[args.show_format]()
        print(formatter.format(numberer.articulations()).content)

    return 0


if __name__ == "__main__":
    sys.exit(main())
