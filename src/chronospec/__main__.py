"""CLI entry point: run `chronospec SPEC` or `python -m chronospec SPEC`."""

import sys
from pathlib import Path


def main(argv=None) -> int:
    import argparse
    import logging
    from .algebra.expansion import expand
    from .driver import SpecDriver, endpoint_of
    from .shared.errors import ChronospecError, ParseError
    from .shared.serialization import dumps
    from .utils.config import DEFAULT_OCCURRENCE_COUNT
    from .utils.io_utils import read_spec_lines

    parser = argparse.ArgumentParser(
        prog="chronospec",
        description="Parse an extended ISO 8601 specification and list its occurrences.",
    )
    parser.add_argument("spec", nargs="?", help="Specification, e.g. 2020Y2M{28..-1}D")
    parser.add_argument("--file", type=Path, help="Read specifications from a file, one per line")
    parser.add_argument("--count", "-n", type=int, default=DEFAULT_OCCURRENCE_COUNT,
                        help=f"Number of occurrences to print (default: {DEFAULT_OCCURRENCE_COUNT})")
    parser.add_argument("--tokens", action="store_true", help="Print the token tree")
    parser.add_argument("--expand", action="store_true", help="Print the expanded rows")
    parser.add_argument("--sexp", action="store_true", help="Print results as S-expressions")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.file is not None:
        path = args.file.resolve()
        if not path.is_file():
            sys.stderr.write(f"chronospec: error: file not found: {path}\n")
            return 1
        specs = read_spec_lines(path)
    elif args.spec is not None:
        specs = [args.spec]
    else:
        parser.print_usage(sys.stderr)
        sys.stderr.write("chronospec: error: a specification or --file is required\n")
        return 2

    def show(value) -> str:
        return dumps(value) if args.sexp else repr(value)

    driver = SpecDriver()
    status = 0
    for text in specs:
        try:
            tokens = driver.parse(text)
            if args.tokens:
                print(show(tokens))
            elif args.expand:
                for row in expand(endpoint_of(tokens)):
                    print(show(row))
            else:
                for occurrence in driver.occurrences(tokens, args.count):
                    print(show(occurrence))
        except ParseError as e:
            sys.stderr.write(e.format() + "\n")
            status = 1
        except ChronospecError as e:
            sys.stderr.write(f"chronospec: error: {e}\n")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
