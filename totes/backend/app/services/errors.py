"""
Domain errors raised by services.

Both subclass ValueError so callers that only care about "bad request" can
catch ValueError; handlers map NotFoundError -> 404, ConflictError -> 409,
any other ValueError -> 400.
"""


class NotFoundError(ValueError):
    """A referenced record does not exist"""


class ConflictError(ValueError):
    """The request is valid but clashes with current state (duplicate, slot full, wrong order state, no stock)"""
