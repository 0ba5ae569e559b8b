"""Typed exceptions for rule resolution and holiday lookup."""


class InvalidDateError(ValueError):
    """A rule has no occurrence in the requested year."""

    def __init__(self, label: str, year: int, message: str) -> None:
        self.label = label
        self.year = year
        super().__init__(f"[{label}] No date in {year}: {message}")


class UnknownHolidayError(LookupError):
    """Holiday name not recognized."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown holiday: {name!r}")
