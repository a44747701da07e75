from math import ceil
from typing import Any, List, Tuple

from roombook.schemas.common_responses import PaginationMeta


async def paginate(query: Any, page: int, page_size: int) -> Tuple[List[Any], PaginationMeta]:
    """Slice a beanie find query into one page plus its metadata."""
    page = max(page, 1)
    page_size = page_size if page_size > 0 else 10

    total_items = await query.count()
    total_pages = ceil(total_items / page_size) if total_items else 1
    page = min(page, total_pages)

    items = await query.skip((page - 1) * page_size).limit(page_size).to_list()

    return items, PaginationMeta(
        total_items=total_items,
        total_pages=total_pages,
        current_page=page,
        page_size=page_size,
    )
