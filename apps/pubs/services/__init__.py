"""
Pubs services - Business logic layer.

This package contains:
- Pub listing and lookup
- Staff-side pub creation and cascading delete
- Rating aggregation from reviews
"""

from .pub_listing import (
    get_all_pubs,
    get_pub_by_id,
)

from .pub_management import (
    create_pub,
    delete_pub,
)

from .rating_aggregation import (
    calculate_rating,
    rating_from_totals,
    update_pub_rating,
)

from .exceptions import (
    PubsServiceError,
    PubNotFoundError,
)

__all__ = [
    # Listing
    'get_all_pubs',
    'get_pub_by_id',
    # Management
    'create_pub',
    'delete_pub',
    # Rating aggregation
    'calculate_rating',
    'rating_from_totals',
    'update_pub_rating',
    # Exceptions
    'PubsServiceError',
    'PubNotFoundError',
]
