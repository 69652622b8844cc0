import click

from mplus_source.utils import extract_id


def _validate_link(value: str, kind: str, label: str) -> str:
    identifier = extract_id(value, kind)
    if identifier is None:
        raise click.BadParameter(f"Invalid {label}: {value}")
    return identifier


def validate_series(ctx: click.Context, param, value):
    """
    Validate a series argument and reduce it to a title id.

    Accepts a bare numeric id or a link of the form ``.../titles/<id>``.
    """
    return _validate_link(value, "titles", "series id or url")


def validate_chapter(ctx: click.Context, param, value):
    """
    Validate a chapter argument and reduce it to a chapter id.

    Accepts a bare numeric id or a link of the form ``.../viewer/<id>``.
    """
    return _validate_link(value, "viewer", "chapter id or url")
