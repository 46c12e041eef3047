"""FlowerType — sex of the flowers a database record describes"""

from enum import Enum

from src.core.errors import UnknownFlowerType


class FlowerType(str, Enum):
    """Flower sex; values are the database codes"""

    BISEXUAL = "b"
    CARPELLATE = "c"
    STAMINATE = "s"

    @classmethod
    def parse(cls, token: str) -> "FlowerType":
        """
        Parse a flower type code (b, c, s).

        Raises:
            UnknownFlowerType: unrecognised code
        """
        try:
            return cls(token)
        except ValueError:
            raise UnknownFlowerType(token, field="flower_type") from None

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.display_name
