import json
from collections.abc import Mapping, Sequence
from typing import Any

from markupsafe import Markup

from ehr.db.queries.schema import ColumnDescriptor, get_table_schema
from ehr.env import Env
from ehr.form.html import form_submit
from ehr.form.widget import FormField, render_widget
from ehr.logging import log, log_verbose
from ehr.util.text import id_to_label


def render_table_form(
    env: Env,
    table_name: str,
    data: Mapping[str, Any],
    hide: Sequence[str] = [],
    show: Sequence[str] = [],
    sort: Mapping[str, int] = {},
    dropdown: Mapping[str, Mapping[str, str]] = {},
    readonly: Sequence[str] = [],
    submit: str | None = None,
) -> Markup:
    """
    Render the fields of a form for a database table, one field per column of that table.

    `data` contains the current value of the fields, the columns that are not in `data` use their
    database default value. If `show` is not empty, only the columns in `show` are visible and
    `hide` is ignored, otherwise the columns in `hide` and the configured hidden columns are
    hidden. `sort` gives the position of the columns, and defaults to the order of `show`.
    `dropdown` gives the options of the columns that are rendered as a select, and `readonly` the
    columns that cannot be edited. If `submit` is provided, a submit button with that label is
    added at the end of the form.
    """

    if show and not sort:
        sort = {name: index for index, name in enumerate(show)}

    if sort:
        log_verbose(env, f"Sorting schema using {json.dumps(sort)}")

    schema = get_table_schema(env.db, table_name, sort)

    hidden_columns = [*env.form_config.hidden_columns, *hide]

    html: list[Markup] = []
    for column in schema:
        if show:
            hidden = column.name not in show
        else:
            hidden = column.name in hidden_columns

        field = FormField(
            column,
            get_field_value(env, column, data),
            hidden,
            column.name in readonly,
            dropdown.get(column.name),
        )

        html.append(render_form_row(env, field))

    if submit:
        html.append(Markup("<div class='row justify-content-end mt-4'>"))
        html.append(form_submit('submit', submit, {'class': 'btn btn-primary col-4'}))
        html.append(Markup('</div>'))

    return Markup(' ').join(html)


def get_field_value(env: Env, column: ColumnDescriptor, data: Mapping[str, Any]) -> str:
    """
    Get the value displayed in the field of a column, that is, its value in the data, or its
    database default value, or an empty string.
    """

    value = data.get(column.name)
    if value is None:
        value = column.default

    if value is None:
        return ''

    # Booleans render as `1` or an empty string.
    if isinstance(value, bool):
        return '1' if value else ''

    if isinstance(value, list | dict):
        value = json.dumps(value)
        log(env, f"Column `{column.name}` value is an array. Casting to JSON string: `{value}`.")

    return str(value)


def render_form_row(env: Env, field: FormField) -> Markup:
    """
    Render a form field as a row made of a label and the field widget. The label of the required
    columns is marked with an asterisk.
    """

    required = '*' if not field.column.is_nullable else ''
    hidden = Markup(' hidden') if field.hidden else ''

    return Markup(' ').join([
        Markup("<div class='row'>"),
        Markup("<label class='col-4 col-form-label'{}>{}{} </label>").format(hidden, id_to_label(field.name), required),
        Markup("<div class='col-8'>"),
        render_widget(env, field),
        Markup('</div>'),
        Markup('</div>'),
    ])
