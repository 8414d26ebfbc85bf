from __future__ import annotations

import typer

from name_validator.cli.commands.check import check_command
from name_validator.cli.commands.split import split_command
from name_validator.cli.commands.stats import stats_command

app = typer.Typer(
    name="name-validator",
    help="Split, validate and clean personal names in CSV files",
    add_completion=False,
)

app.command("split")(split_command)
app.command("check")(check_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
