"""Base class for the tree services."""


class Service:
    """Domain service working on the content tree through a PostRepository.

    Services hold no state of their own between calls. They are built per
    request scope so that they share that scope's repository.
    """
