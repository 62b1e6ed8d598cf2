class PageActionError(RuntimeError):
    """Raised when a required page action (navigation, menu click) cannot be performed."""
    pass
