import builtins


class ListError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedListError(ListError, builtins.TypeError):
    """Raised when a Cons node is given a rest that is not a list.

    offending_rest is the object that was passed in place of the rest of the
    list.
    """

    def __init__(self, offending_rest: object) -> None:
        super().__init__(
            'the rest of a Cons node must be a List, not {}'.format(
                type(offending_rest).__name__
            )
        )
        self.offending_rest = offending_rest

    def __repr__(self) -> str:
        return f'MalformedListError({self.offending_rest!r})'


class ClosedVariantError(ListError, builtins.TypeError):
    def __init__(self, cls: type) -> None:
        super().__init__(
            f'{cls.__qualname__} cannot extend a list: Empty and Cons are the only variants'
        )
        self.cls = cls

    def __repr__(self) -> str:
        return f'ClosedVariantError({self.cls!r})'
