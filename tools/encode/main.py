"""
CLI tool to turn JAN codes into glyph strings for the JAN barcode font.

Usage:
    jancode-encode 4912345678904 1234567
    jancode-encode --input codes.txt --format csv
    cat codes.txt | jancode-encode --format json
"""

import csv
import json
import sys
from io import StringIO

import click
import structlog

from jancode.barcode import encode_batch, parse_code_list
from jancode.config import configure_logging, get_settings
from jancode.models import BatchReport

logger = structlog.get_logger(__name__)


def format_text(report: BatchReport) -> str:
    """One `code<TAB>symbols` line per encoded code."""
    return "".join(f"{r.code}\t{r.symbols}\n" for r in report.encoded)


def format_csv(report: BatchReport) -> str:
    """CSV with a `code,symbols` header."""
    output = StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(["code", "symbols"])
    for result in report.encoded:
        writer.writerow([result.code, result.symbols])
    return output.getvalue()


def format_json(report: BatchReport, font_name: str) -> str:
    """JSON document with every result, rejected ones included."""
    data = {
        "font": font_name,
        "results": [r.model_dump(mode="json") for r in report.results],
        "encoded_count": report.encoded_count,
        "skipped_count": report.skipped_count,
    }
    return json.dumps(data, indent=2) + "\n"


@click.command()
@click.argument("codes", nargs=-1)
@click.option(
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="File with one code per line (default: stdin). Ignored when codes are given.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "csv", "json"]),
    default=None,
    help="Output format (default: OUTPUT_FORMAT setting)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any code was skipped",
)
def main(codes: tuple[str, ...], input_file, output_format: str | None, strict: bool):
    """Encode JAN/EAN codes for the JAN barcode font."""
    settings = get_settings()
    configure_logging(settings)

    if codes:
        code_list = [c.strip() for c in codes if c.strip()]
    else:
        code_list = parse_code_list(input_file.read())

    if not code_list:
        click.echo("Invalid input. Please enter JAN codes.", err=True)
        sys.exit(2)

    report = encode_batch(code_list)

    output_format = output_format or settings.output_format
    if output_format == "csv":
        click.echo(format_csv(report), nl=False)
    elif output_format == "json":
        click.echo(format_json(report, settings.font_name), nl=False)
    else:
        click.echo(format_text(report), nl=False)

    for result in report.skipped:
        click.echo(f"Invalid JAN code: {result.code} ({result.message})", err=True)

    click.echo(f"Processed JAN codes: {report.encoded_count}", err=True)
    click.echo(f"Skipped JAN codes: {report.skipped_count}", err=True)

    if strict and report.skipped_count:
        logger.error("Some codes were skipped", skipped=report.skipped_count)
        sys.exit(1)


if __name__ == "__main__":
    main()
