"""Query helpers shared by repositories and read functions."""

_PAGE_SIZE = 100


def fetch_all(queryset):
    """Walk a queryset page by page so large result sets are not truncated."""
    offset = 0
    while True:
        page = queryset.offset(offset).limit(_PAGE_SIZE).all().items
        yield from page
        if len(page) < _PAGE_SIZE:
            return
        offset += _PAGE_SIZE
