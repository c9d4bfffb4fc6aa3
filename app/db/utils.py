from typing import Any

from sqlalchemy import inspect


def column_values(entity: object, excluded_attrs: set[str] | None = None) -> dict[str, Any]:
    """
    Returns the mapped column attributes of an ORM entity as a plain dict.

    Works for transient, detached and persistent instances alike, so a caller
    can build an entity without a session and still hand all of its fields to
    a repository.
    """
    excluded_attrs = excluded_attrs or set()
    mapper = inspect(type(entity))
    return {
        attr.key: getattr(entity, attr.key)
        for attr in mapper.column_attrs
        if attr.key not in excluded_attrs
    }


def apply_dict_updates(entity: object, update_data: dict[str, Any], excluded_attrs: set[str] | None) -> None:
    """
    Applies key-value pairs from a dictionary to an ORM entity.

    Args:
        entity: The SQLAlchemy ORM object loaded into the session.
        update_data: Dictionary of fields and values to write.
        excluded_attrs: Attribute names that are never written (identity, creation audit).
    """
    excluded_attrs = excluded_attrs if excluded_attrs else set()
    for key, value in update_data.items():

        if key in excluded_attrs:
            continue

        if hasattr(entity, key):
            setattr(entity, key, value)
