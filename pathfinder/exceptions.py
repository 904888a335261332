class StorageNotReady(Exception):
    """
    The course/domain tables cannot be queried, typically because migrations
    have not run yet (e.g. during installation). Never leaves the resolver.
    """
