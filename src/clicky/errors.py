"""Exception hierarchy for clicky operations."""


class ClickyError(Exception):
    """Base exception for clicky errors."""

    pass


class NotFoundError(ClickyError):
    """A board, card or column is absent where one is required."""

    pass


class BoardNotFoundError(NotFoundError):
    """No board exists at the requested location."""

    def __init__(self, message: str = "No board found. Run 'clicky init' to create one.") -> None:
        super().__init__(message)


class CardNotFoundError(NotFoundError):
    """Card ID is unknown."""

    def __init__(self, card_id: str) -> None:
        super().__init__(f"Card not found: {card_id}")
        self.card_id = card_id


class ColumnNotFoundError(NotFoundError):
    """Column ID is unknown."""

    def __init__(self, column_id: str) -> None:
        super().__init__(f"Column not found: {column_id}")
        self.column_id = column_id


class AlreadyExistsError(ClickyError):
    """Something already exists where it would be created."""

    pass


class BoardAlreadyExistsError(AlreadyExistsError):
    """A board is already initialized at the target location."""

    def __init__(self, message: str = "Board already initialized in this directory") -> None:
        super().__init__(message)


class ColumnAlreadyExistsError(AlreadyExistsError):
    """Column ID is already used on the board."""

    def __init__(self, column_id: str) -> None:
        super().__init__(f"Column already exists: {column_id}")
        self.column_id = column_id


class InvalidInputError(ClickyError):
    """Input rejected at the service boundary (e.g. empty title)."""

    pass


class EdgeOfSequenceError(ClickyError):
    """Reorder rejected because the card is already at the top or bottom."""

    pass


class StorageError(ClickyError):
    """Underlying read or write of the board file failed."""

    pass
