from pydantic import BaseModel, Field

from headline.models.news import Results


def total_pages_for(total_results: int, page_size: int) -> int:
    """Number of pages for a result count.

    Uses truncating division, so a trailing partial page is not counted
    (45 results at 20 per page gives 2 pages).
    """
    return total_results // page_size


class Search(BaseModel):
    """Pagination state for one search request."""

    search_key: str = ""
    next_page: int = 1
    total_pages: int = 0
    results: Results = Field(default_factory=Results)

    def is_last_page(self) -> bool:
        return self.next_page >= self.total_pages

    def current_page(self) -> int:
        if self.next_page == 1:
            return self.next_page
        return self.next_page - 1

    def previous_page(self) -> int:
        # Not clamped: 0 on the first page.
        return self.current_page() - 1

    def finalize(self, results: Results, page_size: int) -> None:
        """Record a fetched page and move next_page forward if more remain."""
        self.results = results
        self.total_pages = total_pages_for(results.total_results, page_size)
        if not self.is_last_page():
            self.next_page += 1
