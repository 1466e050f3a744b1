"""SQLite loan repository implementation."""

from datetime import date

from libraryapi.domain.models import Book, Loan
from libraryapi.infrastructure.implementations.sqlite.database import SQLiteDatabase
from libraryapi.infrastructure.repositories.loan_repository import LoanRepository


def _returned_to_db(returned: bool | None) -> int | None:
    return None if returned is None else int(returned)


class SQLiteLoanRepository(LoanRepository):
    """Loan storage in the `loans` table, joined to `books` on read."""

    def __init__(self, database: SQLiteDatabase):
        self.database = database

    async def exists_active_loan_for_book(self, book: Book) -> bool:
        rows = self.database.query(
            "SELECT 1 FROM loans WHERE book_id = ? "
            "AND (returned IS NULL OR returned = 0) LIMIT 1",
            (book.id,),
        )
        return bool(rows)

    async def save(self, loan: Loan) -> Loan:
        values = (
            loan.book.id,
            loan.customer,
            loan.isbn,
            loan.loan_date.isoformat(),
            _returned_to_db(loan.returned),
        )

        if loan.id is None:
            cursor = self.database.execute(
                "INSERT INTO loans (book_id, customer, isbn, loan_date, returned) "
                "VALUES (?, ?, ?, ?, ?)",
                values,
            )
            loan_id = cursor.lastrowid
        else:
            cursor = self.database.execute(
                "UPDATE loans SET book_id = ?, customer = ?, isbn = ?, "
                "loan_date = ?, returned = ? WHERE id = ?",
                (*values, loan.id),
            )
            if cursor.rowcount == 0:
                self.database.execute(
                    "INSERT INTO loans "
                    "(id, book_id, customer, isbn, loan_date, returned) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    (loan.id, *values),
                )
            loan_id = loan.id

        return Loan(
            id=loan_id,
            book=loan.book,
            customer=loan.customer,
            isbn=loan.isbn,
            loan_date=loan.loan_date,
            returned=loan.returned,
        )

    async def find_by_id(self, loan_id: int) -> Loan | None:
        rows = self.database.query(
            "SELECT l.id, l.customer, l.isbn, l.loan_date, l.returned, "
            "b.id AS book_id, b.isbn AS book_isbn, b.title, b.author "
            "FROM loans l JOIN books b ON b.id = l.book_id WHERE l.id = ?",
            (loan_id,),
        )
        if not rows:
            return None

        row = rows[0]
        return Loan(
            id=row["id"],
            book=Book(
                id=row["book_id"],
                isbn=row["book_isbn"],
                title=row["title"],
                author=row["author"],
            ),
            customer=row["customer"],
            isbn=row["isbn"],
            loan_date=date.fromisoformat(row["loan_date"]),
            returned=None if row["returned"] is None else bool(row["returned"]),
        )
