"""
Selection of the HTML widget of a form field.

The widget of a field is produced by the first rule of `WIDGET_RULES` that returns some markup for
that field, a rule returns `None` if it does not apply to the field.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from markupsafe import Markup

from ehr.db.queries.enum import get_enum_variants
from ehr.db.queries.schema import ColumnDescriptor
from ehr.env import Env
from ehr.exception.enum_type_not_found_error import EnumTypeNotFoundError
from ehr.form.html import SELECTIZE_ID, Attributes, form_dropdown, form_input, html_datetime_local
from ehr.logging import log, log_verbose
from ehr.util.iter import find

PLEASE_SELECT_OPTION = {'': '--Please Select--'}


@dataclass
class FormField:
    """
    A column of a table rendered as a form field.
    """

    column: ColumnDescriptor
    value: str
    hidden: bool
    readonly: bool
    # Options provided by the caller for this column, if any
    dropdown: Mapping[str, str] | None = None

    @property
    def name(self) -> str:
        return self.column.name

    def attributes(self) -> dict[str, str | bool | None]:
        return {
            'id':       self.name,
            'class':    'col-8 form-control',
            'hidden':   self.hidden,
            'readonly': self.readonly,
        }


WidgetRule = Callable[[Env, FormField], Markup | None]


def _select(name: str, options: Mapping[str, str], selected: str | list[str], attributes: Attributes) -> Markup:
    return form_dropdown(name, options, selected, {**attributes, 'id': SELECTIZE_ID})


def _parse_list_value(value: str) -> list[str]:
    """
    Parse the value of a multi-value field, which is a JSON list or a single value.
    """

    if value == '':
        return []

    try:
        values = json.loads(value)
    except json.JSONDecodeError:
        return [value]

    if not isinstance(values, list):
        return [str(values)]

    return [str(item) for item in values]


def email_input(env: Env, field: FormField) -> Markup | None:
    if 'email' not in field.name.lower():
        return None

    return form_input(field.name, field.value, 'email', field.attributes())


def date_input(env: Env, field: FormField) -> Markup | None:
    if field.column.data_type != 'date':
        return None

    return form_input(field.name, field.value, 'date', field.attributes())


def datetime_local_input(env: Env, field: FormField) -> Markup | None:
    if field.column.data_type != 'timestamp without time zone':
        return None

    return form_input(field.name, html_datetime_local(field.value), 'datetime-local', field.attributes())


def number_input(env: Env, field: FormField) -> Markup | None:
    data_type = field.column.data_type
    if 'double' not in data_type and data_type not in ('numeric', 'integer'):
        return None

    return form_input(field.name, field.value, 'number', field.attributes())


def multi_value_select(env: Env, field: FormField) -> Markup | None:
    """
    Render the configured multi-value fields as a multiple select whose options are the values of
    the field enum type.
    """

    multi_value_field = find(
        lambda multi_value_field: multi_value_field.column_name.lower() == field.name.lower(),
        env.form_config.multi_value_fields,
    )

    if multi_value_field is None:
        return None

    log_verbose(env, f"Column with name {field.name} is a multi-value field.")

    try:
        enum_variants = get_enum_variants(env.db, multi_value_field.enum_type)
    except EnumTypeNotFoundError as error:
        log(env, f"Column name {field.name} has no enum values. Using default widget. {error}")
        return None

    attributes = {**field.attributes(), 'multiple': True}
    return _select(
        f'{field.name}[]',
        {**PLEASE_SELECT_OPTION, **enum_variants},
        _parse_list_value(field.value),
        attributes,
    )


def enum_select(env: Env, field: FormField) -> Markup | None:
    """
    Render the columns of a user-defined type as a select whose options are the values of that
    type. Columns whose type is not an enum fall back to the next rules.
    """

    if field.column.data_type != 'USER-DEFINED':
        return None

    try:
        enum_variants = get_enum_variants(env.db, field.column.enum_type)
    except EnumTypeNotFoundError as error:
        log(env, f"Column name {field.name} is not an enum. Using default text. {error}")
        return None

    options = {**PLEASE_SELECT_OPTION, **enum_variants}
    log_verbose(env, f"USER-DEFINED: Rendering {field.name}. selected={field.value}. Values = {json.dumps(options)}")
    return _select(field.name, options, field.value, field.attributes())


def dropdown_select(env: Env, field: FormField) -> Markup | None:
    if not field.dropdown:
        return None

    options = {**PLEASE_SELECT_OPTION, **field.dropdown}
    log_verbose(env, f"Column {field.name} has user-defined dropdown values: {json.dumps(options)}")
    return _select(field.name, options, field.value, field.attributes())


def text_input(env: Env, field: FormField) -> Markup | None:
    return form_input(field.name, field.value, 'text', field.attributes())


WIDGET_RULES: list[WidgetRule] = [
    email_input,
    date_input,
    datetime_local_input,
    number_input,
    multi_value_select,
    enum_select,
    dropdown_select,
    text_input,
]


def render_widget(env: Env, field: FormField) -> Markup:
    """
    Render the widget of a form field using the first widget rule that applies to it.
    """

    for rule in WIDGET_RULES:
        widget = rule(env, field)
        if widget is not None:
            return widget

    # The last rule always applies.
    raise RuntimeError(f"No widget rule applies to column '{field.name}'.")
