from src.bookstore.entities.service.book import Book


def make_books(*pairs: tuple[str | None, str | None]) -> list[Book]:
    return [Book(id=book_id, name=name) for book_id, name in pairs]


def book_json(book_id: str | None, name: str | None) -> dict[str, str | None]:
    return {"id": book_id, "name": name}
