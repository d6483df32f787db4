import re
from dataclasses import dataclass
from datetime import datetime

import pytest
from markupsafe import Markup

from ehr.config_file import FormConfig
from ehr.db.queries.schema import ColumnDescriptor
from ehr.env import Env, make_env
from ehr.form.render import get_field_value, render_table_form
from tests.util.database import add_test_enum_type, add_test_table_schema, create_test_database

SAMPLE_COLUMNS = [
    ColumnDescriptor('uid',                 'uuid',                        False, 'uuid', 'gen_random_uuid()'),
    ColumnDescriptor('patient_uid',         'uuid',                        False, 'uuid', None),
    ColumnDescriptor('sample_type',         'USER-DEFINED',                True,  'sampletype', None),
    ColumnDescriptor('collection_datetime', 'timestamp without time zone', True,  'timestamp', None),
    ColumnDescriptor('last_meal_types',     'ARRAY',                       True,  '_lastmealtype', None),
    ColumnDescriptor('notes',               'text',                        True,  'text', None),
    ColumnDescriptor('version',             'integer',                     False, 'int4', '1'),
    ColumnDescriptor('created_at',          'timestamp without time zone', False, 'timestamp', 'now()'),
    ColumnDescriptor('last_edited',         'timestamp without time zone', False, 'timestamp', 'now()'),
]


@dataclass
class Setup:
    env: Env


@pytest.fixture
def setup():
    db = create_test_database()

    add_test_table_schema(db, 'samplev1', SAMPLE_COLUMNS)
    add_test_enum_type(db, 'sampletype', ['blood', 'urine', 'saliva'])
    add_test_enum_type(db, 'lastmealtype', ['breakfast', 'light_snack', 'heavy_meal'])

    return Setup(make_env(db))


def get_row(html: str, name: str) -> str:
    """
    Get the HTML row of the field of a column.
    """

    for row in html.split("<div class='row'>"):
        if f'name="{name}"' in row or f'name="{name}[]"' in row:
            return row

    raise AssertionError(f"No row found for column '{name}'.")


def is_label_hidden(html: str, name: str) -> bool:
    return "col-form-label' hidden>" in get_row(html, name)


def get_field_names(html: str) -> list[str]:
    """
    Get the names of the fields in their order of appearance in the form.
    """

    return re.findall(r' name="([^"\[]+)(?:\[\])?"', html)


def test_render_table_form_one_row_per_column(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {})
    assert isinstance(html, Markup)
    assert html.count("<div class='row'>") == len(SAMPLE_COLUMNS)


def test_render_table_form_unknown_table(setup: Setup):
    assert render_table_form(setup.env, 'unknown', {}) == ''


def test_render_table_form_default_hidden_columns(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {})
    for name in ['version', 'created_at', 'last_edited']:
        assert is_label_hidden(html, name)
        assert f'id="{name}" class="col-8 form-control" hidden' in get_row(html, name)

    for name in ['uid', 'patient_uid', 'notes']:
        assert not is_label_hidden(html, name)


def test_render_table_form_hide(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, hide=['uid', 'notes'])
    assert is_label_hidden(html, 'uid')
    assert is_label_hidden(html, 'notes')
    assert is_label_hidden(html, 'version')
    assert not is_label_hidden(html, 'patient_uid')


def test_render_table_form_configured_hidden_columns(setup: Setup):
    setup.env.form_config = FormConfig(hidden_columns=['uid'])
    html = render_table_form(setup.env, 'samplev1', {})
    assert is_label_hidden(html, 'uid')
    assert not is_label_hidden(html, 'version')


def test_render_table_form_show_has_precedence_over_hide(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, hide=['notes', 'version'], show=['notes', 'version'])
    for column in SAMPLE_COLUMNS:
        assert is_label_hidden(html, column.name) == (column.name not in ['notes', 'version'])


def test_render_table_form_show_sorts_columns(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, show=['notes', 'version'])
    # Columns that are not shown sort as the first shown column, and keep their order.
    assert get_field_names(html) == [
        'uid',
        'patient_uid',
        'sample_type',
        'collection_datetime',
        'last_meal_types',
        'notes',
        'created_at',
        'last_edited',
        'version',
    ]


def test_render_table_form_sort(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, sort={'uid': 2, 'patient_uid': 1})
    assert get_field_names(html)[-2:] == ['patient_uid', 'uid']
    assert get_field_names(html)[0] == 'sample_type'


def test_render_table_form_readonly(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, readonly=['uid', 'version', 'sample_type'])
    assert 'id="uid" class="col-8 form-control" readonly' in get_row(html, 'uid')
    assert 'id="version" class="col-8 form-control" hidden readonly' in get_row(html, 'version')
    assert 'class="col-8 form-control" readonly>' in get_row(html, 'sample_type')
    assert 'readonly' not in get_row(html, 'notes')


def test_render_table_form_readonly_shown_or_hidden(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, show=['notes'], readonly=['uid', 'notes'])
    assert is_label_hidden(html, 'uid')
    assert ' readonly' in get_row(html, 'uid')
    assert not is_label_hidden(html, 'notes')
    assert ' readonly' in get_row(html, 'notes')


def test_render_table_form_required_label(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {})
    assert '>Patient Uid* </label>' in get_row(html, 'patient_uid')
    assert '>Notes </label>' in get_row(html, 'notes')


def test_render_table_form_values(setup: Setup, capsys: pytest.CaptureFixture[str]):
    data = {
        'patient_uid':         'p-1',
        'sample_type':         'urine',
        'collection_datetime': datetime(2024, 3, 5, 14, 7, 33),
        'last_meal_types':     ['breakfast', 'heavy_meal'],
        'notes':               None,
    }

    html = render_table_form(setup.env, 'samplev1', data)

    # Default value of the column.
    assert 'name="uid" value="gen_random_uuid()"' in html
    assert 'name="patient_uid" value="p-1"' in html
    assert 'name="notes" value=""' in html
    assert '<option value="urine" selected="selected">Urine</option>' in get_row(html, 'sample_type')
    assert 'type="datetime-local" name="collection_datetime" value="2024-03-05T14:07"' in html

    last_meal_types = get_row(html, 'last_meal_types')
    assert '<option value="breakfast" selected="selected">Breakfast</option>' in last_meal_types
    assert '<option value="heavy_meal" selected="selected">Heavy Meal</option>' in last_meal_types
    assert 'Casting to JSON string: `["breakfast", "heavy_meal"]`' in capsys.readouterr().out


def test_render_table_form_dropdown(setup: Setup):
    dropdown = {'patient_uid': {'p-1': 'Asha Rao', 'p-2': 'Ravi Kumar'}}
    html = render_table_form(setup.env, 'samplev1', {'patient_uid': 'p-2'}, dropdown=dropdown)
    row = get_row(html, 'patient_uid')
    assert '<select name="patient_uid" id="selectize"' in row
    assert '<option value="p-2" selected="selected">Ravi Kumar</option>' in row


def test_render_table_form_submit(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {}, submit='Save sample')
    assert html.endswith(
            "<div class='row justify-content-end mt-4'> "
            '<input type="submit" name="submit" value="Save sample" class="btn btn-primary col-4" /> '
            '</div>'
        )


def test_render_table_form_no_submit(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {})
    assert 'type="submit"' not in html


def test_render_table_form_escapes_values(setup: Setup):
    html = render_table_form(setup.env, 'samplev1', {'notes': '<img src=x onerror=alert(1)>'})
    assert '<img' not in html
    assert 'value="&lt;img src=x onerror=alert(1)&gt;"' in html


@pytest.mark.parametrize('value,expected', [(True, '1'), (False, ''), (0, '0'), ({'a': 1}, '{"a": 1}')])
def test_get_field_value(setup: Setup, value: object, expected: str):
    column = ColumnDescriptor('active', 'boolean', True, 'bool', None)
    assert get_field_value(setup.env, column, {'active': value}) == expected


def test_get_field_value_false_overrides_default(setup: Setup):
    column = ColumnDescriptor('active', 'boolean', False, 'bool', 'true')
    assert get_field_value(setup.env, column, {'active': False}) == ''


def test_render_table_form_logs_sort(setup: Setup, capsys: pytest.CaptureFixture[str]):
    env = make_env(setup.env.db, verbose=True)
    render_table_form(env, 'samplev1', {}, show=['notes', 'uid'])
    assert 'Sorting schema using {"notes": 0, "uid": 1}' in capsys.readouterr().out
