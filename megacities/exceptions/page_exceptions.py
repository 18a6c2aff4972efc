class ContainerNotFoundError(LookupError):
    """Raised when the page has no element to render into"""
    pass
