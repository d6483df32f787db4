import json

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator


class JsonList(TypeDecorator[list[str]]):
    """
    Decorator for a list of strings stored as a JSON text.
    In SQL, the type will appear as a string such as '["a", "b"]'.
    In Python, the type will appear as a list of strings.
    """

    impl = Text

    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str | None:
        if value is None:
            return None

        return json.dumps(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str] | None:
        match value:
            case None | '':
                return None
            case _:
                return json.loads(value)
