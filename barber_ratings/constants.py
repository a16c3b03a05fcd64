"""Application constants that never change across environments.

These are fixed business rules for ratings: they do not vary between
dev/staging/prod, so they are not exposed through settings.
"""

# ===== Score Bounds =====
MIN_SCORE = 1
MAX_SCORE = 5
SCORE_BUCKETS = tuple(range(MIN_SCORE, MAX_SCORE + 1))

# ===== Review Text =====
REVIEW_TEXT_MAX_LENGTH = 500

# ===== Pagination =====
MIN_PAGE = 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# ===== Sorting =====
SORT_FIELD_SCORE = "score"
SORT_FIELD_CREATED_AT = "created_at"
SORT_FIELD_UPDATED_AT = "updated_at"
SORT_FIELDS = (SORT_FIELD_SCORE, SORT_FIELD_CREATED_AT, SORT_FIELD_UPDATED_AT)
# camelCase spellings accepted from older clients
SORT_FIELD_ALIASES = {
    "createdAt": SORT_FIELD_CREATED_AT,
    "updatedAt": SORT_FIELD_UPDATED_AT,
}

SORT_ORDER_ASC = "asc"
SORT_ORDER_DESC = "desc"
SORT_ORDERS = frozenset({SORT_ORDER_ASC, SORT_ORDER_DESC})

# ===== Entities (used in not-found messages) =====
ENTITY_BARBER = "barber"
ENTITY_USER = "user"
ENTITY_RATING = "rating"
