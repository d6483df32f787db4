"""
Stateless builders of HTML form elements. All the values are escaped, the returned markup can be
safely embedded in a page.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime

from markupsafe import Markup

# Selects keep a fixed ID since the client-side scripts look them up with it.
SELECTIZE_ID = 'selectize'

Attributes = Mapping[str, str | bool | None]


def html_attributes(attributes: Attributes) -> Markup:
    """
    Write HTML attributes. A `True` attribute is written as a boolean attribute, a `False` or `None`
    attribute is omitted.
    """

    html = Markup('')
    for name, value in attributes.items():
        match value:
            case True:
                html += Markup(' {}').format(name)
            case False | None:
                pass
            case _:
                html += Markup(' {}="{}"').format(name, value)

    return html


def form_input(name: str, value: str = '', type: str = 'text', extra: Attributes = {}) -> Markup:
    """
    Write an `<input>` element.
    """

    return Markup('<input type="{}" name="{}" value="{}"{} />').format(
        type,
        name,
        value,
        html_attributes(extra),
    )


def form_dropdown(
    name: str,
    options: Mapping[str, str],
    selected: str | Iterable[str] | None = None,
    extra: Attributes = {},
) -> Markup:
    """
    Write a `<select>` element whose options are the given value to label mapping. The selected
    options are the options whose value is in `selected`.
    """

    match selected:
        case None:
            selected_values = set()
        case str():
            selected_values = {selected}
        case _:
            selected_values = set(selected)

    html = Markup('<select name="{}"{}>\n').format(name, html_attributes(extra))
    for value, label in options.items():
        html += Markup('<option value="{}"{}>{}</option>\n').format(
            value,
            Markup(' selected="selected"') if value in selected_values else '',
            label,
        )

    html += Markup('</select>\n')
    return html


def form_submit(name: str, value: str, extra: Attributes = {}) -> Markup:
    """
    Write a submit `<input>` element.
    """

    return form_input(name, value, 'submit', extra)


def html_datetime_local(value: str) -> str:
    """
    Convert a date-time string to the format expected by an `<input type="datetime-local">`
    element, that is, `YYYY-MM-DDTHH:MM`. A string that is not a date-time is returned unchanged.
    """

    if value == '':
        return value

    try:
        return datetime.fromisoformat(value).strftime('%Y-%m-%dT%H:%M')
    except ValueError:
        return value
