import click

from capstanignore import __VERSION__
from capstanignore.commands.check import check
from capstanignore.commands.patterns import patterns


@click.group(name="capstanignore")
@click.help_option("--help", "-h")
@click.version_option(__VERSION__, "--version", prog_name="capstanignore")
def cli() -> None:
    """
    Inspect which files a package build leaves out.
    """


cli.add_command(check)
cli.add_command(patterns)
