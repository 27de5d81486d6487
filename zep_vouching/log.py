import click

_SILENT = False


def silent(value: bool = True) -> None:
    """Turns every console message off (or back on)."""
    global _SILENT
    _SILENT = value


def is_silent() -> bool:
    return _SILENT


def _echo(message: str, **styles) -> None:
    if _SILENT:
        return
    click.secho(message, **styles)


def base(message: str) -> None:
    _echo(message)


def info(message: str) -> None:
    _echo(message, fg="green")


def warn(message: str) -> None:
    _echo(message, fg="yellow")


def error(message: str) -> None:
    _echo(message, fg="red", err=True)
