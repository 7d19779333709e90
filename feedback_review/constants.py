"""
Application-wide constants.
"""

# =============================================================================
# Listing Constants
# =============================================================================

DEFAULT_LIST_LIMIT = 20     # Items returned by GET /api/feedback without a usable limit


# =============================================================================
# Persisted Field Names
# =============================================================================

FIELD_SCHEMA = "schema"
FIELD_QUESTION = "question"
FIELD_QUERY = "query"
FIELD_FEEDBACK = "feedback"
FIELD_HIDDEN = "hidden"
FIELD_CREATED_AT = "createdAt"

# Fields that may be patched after creation
UPDATABLE_FIELDS = frozenset({FIELD_FEEDBACK, FIELD_HIDDEN})


# =============================================================================
# Query Parameter Parsing
# =============================================================================

TRUTHY_PARAM_VALUES = frozenset({"true", "1", "yes"})
