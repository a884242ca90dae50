from typing import Optional

import click
import orjson

from httpstatus.codes import StatusClass, classify, lookup, statuses, value_of
from httpstatus.exceptions import UnknownStatusCode, UnknownStatusName
from httpstatus.utilities import print_and_exit
from httpstatus.utilities.logs import log


@click.group()
def cli() -> None:
    """Named HTTP response status codes"""


@cli.command()
@click.argument("name")
def value(name: str) -> None:
    """Print the numeric code of a symbolic status name"""

    try:
        code = value_of(name.upper())
    except UnknownStatusName as e:
        print_and_exit("Status {} not found", e.name)

    click.echo(code)


@cli.command(name="classify")
@click.argument("code", type=int)
def classify_code(code: int) -> None:
    """Print the class of any integer status code"""

    status_class = classify(code)
    log.debug("{} classified as {}", code, status_class.value)
    click.echo(status_class.value)


@cli.command()
@click.argument("code", type=int)
def show(code: int) -> None:
    """Show all details of a registered status code"""

    try:
        status = lookup(code)
    except UnknownStatusCode:
        print_and_exit("Status code {} is not registered", str(code))

    click.echo(f"name: {status.name}")
    click.echo(f"value: {status.value}")
    click.echo(f"class: {status.status_class.value}")
    click.echo(f"reference: {status.reference}")
    click.echo(f"url: {status.reference_url}")


@cli.command(name="list")
@click.option(
    "--class",
    "status_class",
    type=click.Choice([c.value for c in StatusClass if c != StatusClass.unknown]),
    help="Only list codes belonging to the given class",
)
@click.option(
    "--json/--no-json",
    "as_json",
    default=False,
    help="Print the codes as a JSON array",
)
def list_codes(status_class: Optional[str], as_json: bool) -> None:
    """List registered status codes"""

    selected = statuses(StatusClass(status_class) if status_class else None)
    log.info("Found {} status codes", len(selected))

    if as_json:
        data = [
            {
                "name": s.name,
                "value": s.value,
                "class": s.status_class.value,
                "reference": s.reference,
            }
            for s in selected
        ]
        click.echo(orjson.dumps(data).decode("UTF8"))
        return

    for s in selected:
        click.echo(f"{s.value} {s.name}")
