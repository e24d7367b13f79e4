"""Helpers for reading whole result sets through Protean DAOs.

A Protean queryset returns one page (100 rows by default). Listings that
promise "everything" page through until a short page comes back.
"""

PAGE_SIZE = 100


def fetch_all(queryset, page_size=PAGE_SIZE):
    """Return every record matching ``queryset``, in the queryset's order."""
    records = []
    offset = 0
    while True:
        page = queryset.offset(offset).limit(page_size).all()
        records.extend(page.items)
        if len(page.items) < page_size:
            return records
        offset += page_size
