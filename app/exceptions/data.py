class DataCorruptionError(Exception):
    """Raised when a value read back from the database cannot be interpreted."""


class EnumDecodingError(DataCorruptionError):
    """
    Raised when a stored enumeration name does not match any member of the
    mapped Python Enum (e.g. a role renamed or removed after rows were written).
    """

    def __init__(self, enum_class: type, stored_value: str):
        self.enum_class = enum_class
        self.stored_value = stored_value
        super().__init__(f"Stored value {stored_value!r} is not a member of {enum_class.__name__}.")
