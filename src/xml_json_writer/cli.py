"""Command-line interface for the XML to JSON writer."""

import logging
import sys
import xml.etree.ElementTree as ET
import click
from pathlib import Path
from . import __version__
from .error_handler import ErrorHandler
from .io import document_from_file
from .naming import sanitize
from .types import Convention, InvalidInputError
from .writer import JSONWriter

CONVENTION_CHOICES = [convention.value for convention in Convention]


def parse_convention(ctx, param, value: str) -> Convention:
    """Accept every spelling Convention.from_name understands."""
    try:
        return Convention.from_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@click.group()
@click.version_option(version=__version__)
def main():
    """XML JSON Writer - Convert XML documents to JSON."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--convention', '-c', default=Convention.BASIC.value, callback=parse_convention,
              help=f"Mapping convention: {', '.join(CONVENTION_CHOICES)} (default: basic)")
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file path (default: stdout)')
@click.option('--indent', '-i', type=click.IntRange(min=0), default=None,
              help='Indent nested entries by this many spaces')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def convert(input_file: Path, convention: Convention, output: Path, indent: int, verbose: bool):
    """Convert an XML file to JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        document = document_from_file(input_file)
    except (ET.ParseError, OSError) as e:
        click.echo(f"❌ Could not read {input_file}: {e}", err=True)
        sys.exit(1)

    try:
        # Validate before opening the output so an invalid tree leaves no file behind.
        ErrorHandler().check_document(document, convention)
        if output:
            with output.open('w', encoding='utf-8') as sink:
                JSONWriter(sink, convention=convention, indent=indent).write(document)
                sink.write('\n')
            click.echo(f"✅ Wrote {convention.value} JSON to {output}", err=True)
        else:
            out = sys.stdout
            JSONWriter(out, convention=convention, indent=indent).write(document)
            out.write('\n')
    except InvalidInputError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@main.command(name='sanitize')
@click.argument('names', nargs=-1, required=True)
def sanitize_names(names):
    """Print the JSON key each element name maps to."""
    for name in names:
        click.echo(f"{name}\t{sanitize(name)}")


if __name__ == '__main__':
    main()
