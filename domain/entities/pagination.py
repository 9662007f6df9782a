"""Pagination domain entity for note listings."""

from dataclasses import dataclass


@dataclass
class PaginationMetadata:
    """Domain entity representing pagination information for note listings.

    Attributes:
        current_page: Current page number
        total_pages: Total number of pages
        total_notes: Total number of notes found
        notes_per_page: Number of notes per page
        has_next: Whether there is a next page
        has_previous: Whether there is a previous page
    """

    current_page: int
    total_pages: int
    total_notes: int
    notes_per_page: int
    has_next: bool
    has_previous: bool

    @property
    def offset(self) -> int:
        """Calculate the offset for database pagination."""
        return (self.current_page - 1) * self.notes_per_page

    @classmethod
    def calculate(
        cls, current_page: int, total_notes: int, notes_per_page: int
    ) -> "PaginationMetadata":
        """Calculate pagination metadata from basic parameters.

        Args:
            current_page: The current page number (1-based)
            total_notes: Total number of notes found
            notes_per_page: Number of notes per page

        Returns:
            PaginationMetadata: Calculated pagination information
        """
        total_pages = (
            (total_notes + notes_per_page - 1) // notes_per_page
            if total_notes > 0
            else 1
        )
        has_next = current_page < total_pages
        has_previous = current_page > 1

        return cls(
            current_page=current_page,
            total_pages=total_pages,
            total_notes=total_notes,
            notes_per_page=notes_per_page,
            has_next=has_next,
            has_previous=has_previous,
        )
