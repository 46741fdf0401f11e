"""
Command line interface for regenerating the element tables.

Invoke as::

  python -m tagcat --svg svg-index.html --html html-index.html -o tagcat/tables.py

where the inputs are saved copies of the MDN element index pages.  Invoke
with `--help` for usage info.
"""

#-------------------------------------------------------------------------------

import argparse
import logging
from   pathlib import Path
import sys

from   .exc import DuplicateNameError, NameDerivationError
from   .generate import render_tables, scrape_html_index, scrape_svg_index
from   .lib import log

LOG = logging.getLogger(__name__)

#-------------------------------------------------------------------------------

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="tagcat", description="Regenerate the element tables.")
    parser.add_argument(
        "--svg", metavar="FILE", type=Path, required=True,
        help="saved SVG element index page")
    parser.add_argument(
        "--html", metavar="FILE", type=Path, required=True,
        help="saved HTML element index page")
    parser.add_argument(
        "--output", "-o", metavar="FILE", type=Path, default=None,
        help="write tables module to FILE [default: stdout]")
    log.add_option(parser)
    args = parser.parse_args(argv)

    log.configure(args.log)

    try:
        svg_html = args.svg.read_text(encoding="utf-8")
        html_html = args.html.read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"can't read index page: {exc}")

    try:
        source = render_tables(
            scrape_svg_index(svg_html), scrape_html_index(html_html))
    except (NameDerivationError, DuplicateNameError) as exc:
        LOG.error(f"can't generate tables: {exc}")
        raise SystemExit(1)

    if args.output is None:
        sys.stdout.write(source)
    else:
        args.output.write_text(source, encoding="utf-8")
        LOG.info(f"wrote {args.output}")


if __name__ == "__main__":
    main()


