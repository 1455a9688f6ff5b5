from typing import Dict, Optional
from fastapi import Request

PER_PAGE = 15


def get_page_urls(request: Request, page: int) -> Dict[str, Optional[str]]:
    """Previous/next page links that keep the current filters."""
    return {
        "prev": str(request.url.include_query_params(page=page - 1)) if page > 1 else None,
        "next": str(request.url.include_query_params(page=page + 1)),
    }
