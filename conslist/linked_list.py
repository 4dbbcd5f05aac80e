import abc
import logging
from typing import Generic, Reversible, TypeVar, final
from typing_extensions import Never

from conslist.errors import ClosedVariantError, MalformedListError
from conslist.logging import ListLogger

_T_co = TypeVar('_T_co', covariant=True)

_logger = ListLogger(logging.getLogger(__name__))


class List(abc.ABC, Generic[_T_co]):
    """An immutable singly linked list: either Empty or a Cons node."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANT_NAMES:
            raise ClosedVariantError(cls)

    @classmethod
    def from_iterable(cls, iterable: Reversible[_T_co]) -> 'List[_T_co]':
        if isinstance(iterable, List):
            return iterable
        l: List[_T_co] = empty_list
        length = 0
        for el in reversed(iterable):
            l = Cons(el, l)
            length += 1
        _logger.debug('built a list of {} elements', length)
        return l

    def how_many(self) -> int:
        count = self.size(0)
        _logger.debug('counted {} elements', count)
        return count

    @abc.abstractmethod
    def size(self, accumulator: int) -> int:
        """Return accumulator plus the number of elements from this node on."""

    def __len__(self) -> int:
        return self.how_many()

    def __repr__(self) -> str:
        elements = []
        node: List[_T_co] = self
        while isinstance(node, Cons):
            elements.append(node.element)
            node = node.rest
        return f'List.from_iterable({elements!r})'

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')


_VARIANT_NAMES = frozenset({'Empty', 'Cons'})


@final
class Empty(List[_T_co]):
    __slots__ = ()

    def size(self, accumulator: int) -> int:
        return accumulator

    def __bool__(self) -> bool:
        return False


@final
class Cons(List[_T_co]):
    __slots__ = ('_element', '_rest')

    def __init__(self, element: _T_co, rest: List[_T_co]) -> None:
        if not isinstance(rest, List):
            raise MalformedListError(rest)
        object.__setattr__(self, '_element', element)
        object.__setattr__(self, '_rest', rest)

    @property
    def element(self) -> _T_co:
        return self._element

    @property
    def rest(self) -> List[_T_co]:
        return self._rest

    def size(self, accumulator: int) -> int:
        # Same as rest.size(accumulator + 1), with the tail call run as a
        # loop so the stack stays flat on long chains.
        node: List[_T_co] = self
        while isinstance(node, Cons):
            accumulator += 1
            node = node._rest
        return node.size(accumulator)

    def __bool__(self) -> bool:
        return True


empty_list = Empty[Never]()
