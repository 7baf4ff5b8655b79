from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from dogs_api.db.base import Base

# Signed 64-bit, the widest INTEGER the supported backends store.
AGE_MIN = -(2**63)
AGE_MAX = 2**63 - 1


class Dog(Base):
    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    breed: Mapped[str] = mapped_column(String(128), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    # Column types are enforced here so every backend rejects the same
    # values (SQLite would otherwise store anything).
    @validates("name", "description", "breed")
    def _check_text(self, key: str, value):
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a string")
        return value

    @validates("age")
    def _check_age(self, key: str, value):
        # JSON 3.0 and 1e1 decode as floats but are whole numbers.
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("age must be an integer")
        if not AGE_MIN <= value <= AGE_MAX:
            raise ValueError("age is out of range")
        return value
