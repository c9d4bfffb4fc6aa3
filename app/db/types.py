from enum import Enum
from typing import TypeVar

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from app.exceptions.data import EnumDecodingError

E = TypeVar("E", bound=Enum)


class EnumName(TypeDecorator[E]):
    """
    Persists a Python Enum as the member NAME in a plain string column.

    Storing the name rather than the ordinal (or the value) keeps existing rows
    valid when members are reordered. Reading a name that no longer exists
    raises EnumDecodingError instead of silently returning None.
    """

    impl = String
    cache_ok = True

    def __init__(self, enum_class: type[E], length: int = 20):
        super().__init__(length=length)
        self.enum_class = enum_class

    def process_bind_param(self, value: E | str | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, self.enum_class):
            return value.name
        # Accept the bare member name so query filters like `== "ADMIN"` keep working
        if isinstance(value, str) and value in self.enum_class.__members__:
            return value
        raise ValueError(f"{value!r} is not a valid {self.enum_class.__name__}.")

    def process_result_value(self, value: str | None, dialect: Dialect) -> E | None:
        if value is None:
            return None
        try:
            return self.enum_class[value]
        except KeyError:
            raise EnumDecodingError(self.enum_class, value) from None
