import click

from .commands import find, show


@click.group()
def cli():
    """treepath: rebuild tree paths from unordered id pools."""
    pass


cli.add_command(find)
cli.add_command(show)


if __name__ == "__main__":
    cli()
