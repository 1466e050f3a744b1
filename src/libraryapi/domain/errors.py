"""Domain errors for rule violations and caller misuse."""


class LibraryError(Exception):
    """
    Base error for the library domain.

    Carries a single human-readable message.
    """

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class BusinessRuleViolation(LibraryError):
    """An operation would break a catalog or loan invariant."""


class InvalidArgument(LibraryError, ValueError):
    """A caller broke the operation contract (e.g. missing identifier)."""


class NotFound(LibraryError):
    """A lookup by identifier found nothing. Raised by request handlers only."""


# Messages returned to API clients
DUPLICATED_ISBN = "Isbn já cadastrado"
BOOK_ALREADY_LOANED = "Book already loaned"
BOOK_NOT_FOUND_FOR_ISBN = "Book not found for passed isbn"
BOOK_ID_REQUIRED = "Book id cant be null."
BOOK_ISBN_REQUIRED = "Book isbn cant be empty."
