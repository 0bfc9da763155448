import enum


class Absent(enum.Enum):
    """Marker returned by lookups that find nothing.

    This is a dedicated type rather than ``None`` so that ``None`` stays a valid key and value.
    """

    ABSENT = enum.auto()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.name


ABSENT = Absent.ABSENT
