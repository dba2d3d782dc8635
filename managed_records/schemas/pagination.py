"""Page window (limit/offset) for the /records endpoint."""

from pydantic import BaseModel, Field

PAGE_ITEMS = 10


class PageWindow(BaseModel):
    """Query params selecting one page of records."""

    limit: int = Field(default=PAGE_ITEMS + 1, ge=1, description="Max items to request")
    offset: int = Field(default=0, ge=0, description="Number of items to skip")

    @classmethod
    def for_page(cls, page: int, page_items: int = PAGE_ITEMS) -> "PageWindow":
        """Window for a 1-indexed page. One extra item is requested to detect the last page."""
        offset = (page - 1) * page_items if page > 0 else 0
        return cls(limit=page_items + 1, offset=offset)
