"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services hold poll rules that act on a post as a whole, such as
    applying a vote and recording who cast it.
    """
