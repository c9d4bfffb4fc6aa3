from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base
from .definitions import User

CATEGORY_NAME_MAX_LENGTH = 50


class Category(Base):
    """
    The Category Table (Categories).
    Classifies financial transactions into groups such as "Food" or "Rent".

    A category is either private to one user (user_id set) or system-wide
    (user_id NULL). Categories flagged is_default are visible to every user.
    """

    __tablename__ = "Categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Category ID.")
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey(User.id, ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="Owning user, NULL for system-wide categories.",
    )
    name: Mapped[str] = mapped_column(
        String(CATEGORY_NAME_MAX_LENGTH), nullable=False, comment="Name of the category (e.g., Food, Rent)."
    )
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, comment="System-defined category available to all users."
    )

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r} user_id={self.user_id}>"
