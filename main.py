import click

from cli import find, show


@click.group()
def main():
    pass


main.add_command(find)
main.add_command(show)


if __name__ == "__main__":
    main()
