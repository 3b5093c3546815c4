class IntrospectionError(ValueError):
    """Base class for errors raised while building a model from introspection data."""


class MissingReferenceError(IntrospectionError):
    """
    An identifier referenced by one catalog record has no match in the snapshot.

    The snapshot is malformed or stale; the build is aborted.
    """

    def __init__(self, kind: str, identifier: str, context: str | None = None):
        self.kind = kind
        self.identifier = identifier
        self.context = context
        message = f"{kind} with id {identifier} not found in introspection data"
        if context:
            message = f"{message} ({context})"
        super().__init__(message + ".")


class UnsupportedConstraintError(IntrospectionError):
    def __init__(self, code: str, name: str | None = None):
        self.code = code
        self.name = name
        super().__init__(
            f"Unsupported constraint type {code!r} on constraint {name or '<unnamed>'}; "
            "only 'p', 'u' and 'f' constraints are modeled."
        )


class MalformedConstraintError(IntrospectionError):
    """A foreign key whose local and referenced column lists do not line up."""

    def __init__(self, name: str | None, key_nums: list[int], foreign_nums: list[int] | None):
        self.name = name
        self.key_nums = key_nums
        self.foreign_nums = foreign_nums
        super().__init__(
            f"Foreign key {name or '<unnamed>'} maps columns {key_nums} "
            f"to referenced columns {foreign_nums}; both lists must have the same length."
        )
