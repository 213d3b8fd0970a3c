class ResolveError(ValueError):
    """Base class for names that cannot be resolved to an object digest."""

    pass


class UnknownReferenceError(ResolveError):
    """Denotes a reference that is not known."""

    def __init__(self, ref: str) -> None:
        super(UnknownReferenceError, self).__init__(f"Unknown reference: {ref}")
        self.ref = ref
