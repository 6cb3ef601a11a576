"""Partial birthdays as returned by Graph."""
from datetime import date

# Leap year so that 02/29 is representable when the year is unknown
PLACEHOLDER_YEAR = 2000


class Birthday(date):
    """
    A birthday that may lack its year or its month and day.

    Graph returns ``MM/DD/YYYY``, ``MM/DD`` or ``YYYY`` depending on the
    permissions granted. ``YYYY/MM/DD`` is accepted as well.
    """

    def __new__(cls, value: str):
        parts = str(value).split('/')
        if len(parts) == 3:
            if len(parts[0]) == 4:
                year, month, day = parts
            else:
                month, day, year = parts
        elif len(parts) == 2:
            (month, day), year = parts, PLACEHOLDER_YEAR
        elif len(parts) == 1:
            year, month, day = parts[0], 1, 1
        else:
            raise ValueError(f"Invalid birthday: {value!r}")

        instance = super().__new__(cls, int(year), int(month), int(day))
        instance._raw = str(value)
        instance._has_date = len(parts) in (2, 3)
        instance._has_year = len(parts) in (1, 3)
        return instance

    def has_date(self) -> bool:
        """True when month and day are known."""
        return self._has_date

    def has_year(self) -> bool:
        return self._has_year

    def to_graph_string(self) -> str:
        """The birthday in the partial form Graph sent."""
        return self._raw

    def __reduce__(self):
        return (type(self), (self._raw,))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Birthday({self._raw!r})"
