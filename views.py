"""
Live, lazy views over an in-memory ordered sequence.

A view never copies the backing data: every read walks the backing
sequence again and every write goes straight through to it. Views are
derived from each other with ``filter`` and ``map`` and can be chained
freely; nothing is evaluated until you iterate.

Views are not thread-safe. Mutating the backing sequence while a view
is being iterated is undefined unless ``fail_fast`` is on, in which case
a change in the backing length is reported as ConcurrentModificationError.
"""

import logging
import functools
import itertools
from abc import abstractmethod
from collections.abc import Collection, MutableSequence, Sequence
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from models import ViewOptions, get_default_options

logger = logging.getLogger('lazy_views.views')

Predicate = Callable[[Any], bool]
Transform = Callable[[Any], Any]

_NOTHING = object()


class ViewError(Exception):
    """Base class for errors raised by views."""
    pass


class InvalidArgumentError(ViewError, ValueError):
    """Raised when an element is rejected by a view's predicate."""
    pass


class UnsupportedOperationError(ViewError, NotImplementedError):
    """Raised when a view cannot perform the requested write."""
    pass


class ConcurrentModificationError(ViewError, RuntimeError):
    """Raised when the backing sequence changes size during iteration."""
    pass


class BaseView(Collection):
    """
    Operations shared by every view. Subclasses provide iteration and the
    write primitives (_append, _remove_first, _remove_all).
    """
    kind = 'view'

    def __init__(self, options: Optional[ViewOptions] = None):
        self._options = options or get_default_options()

    @property
    def options(self) -> ViewOptions:
        return self._options

    # --------- deriving views (lazy) ----------
    def filter(self, predicate: Predicate) -> 'FilteredView':
        return FilteredView(self, predicate)

    def map(self, function: Transform, inverse: Optional[Transform] = None) -> 'MappedView':
        return MappedView(self, function, inverse)

    # alias for chains written as .filter(...).transform(...)
    transform = map

    # --------- iteration ----------
    @abstractmethod
    def __iter__(self) -> Iterator:
        ...

    def iterate(self) -> Iterator:
        """Lazy pass over the elements currently visible through the view"""
        return iter(self)

    def to_list(self) -> List:
        """Snapshot of the current state; later mutations do not affect it"""
        # list(self) would call __len__ first, an extra full pass on filtered views
        return [element for element in self]

    # --------- size & membership ----------
    def __len__(self) -> int:
        count = 0
        for _ in self:
            count += 1
        return count

    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        for _ in self:
            return False
        return True

    def __contains__(self, item) -> bool:
        return any(element == item for element in self)

    # --------- writes (pass through to the backing sequence) ----------
    def add(self, item) -> bool:
        """Add an element through the view. Returns True when the backing changed."""
        self._append(item)
        return True

    def remove(self, item) -> bool:
        """Remove the first element equal to item. Returns False when nothing matched."""
        return self._remove_first(lambda element: element == item)

    def remove_if(self, predicate: Predicate) -> int:
        """Remove every visible element satisfying predicate, returning the count"""
        return self._remove_all(predicate)

    def clear(self) -> None:
        """Remove every element visible through the view from the backing sequence"""
        self._remove_all(lambda element: True)

    @abstractmethod
    def _append(self, item) -> None:
        ...

    @abstractmethod
    def _remove_first(self, match: Predicate) -> bool:
        ...

    @abstractmethod
    def _remove_all(self, match: Predicate) -> int:
        ...

    # --------- reducing operations (force evaluation) ----------
    def count(self, predicate: Optional[Predicate] = None) -> int:
        """Return the number of elements, or of elements satisfying predicate"""
        if predicate is None:
            return len(self)
        return sum(1 for element in self if predicate(element))

    def first(self, default=None):
        """Return the first element, or default if empty"""
        for element in self:
            return element
        return default

    def last(self, default=None):
        """Return the last element, or default if empty"""
        last_element = default
        for element in self:
            last_element = element
        return last_element

    def find(self, predicate: Predicate, default=None):
        """Return the first element that satisfies the predicate, or default"""
        for element in self:
            if predicate(element):
                return element
        return default

    def all_match(self, predicate: Predicate) -> bool:
        return all(predicate(element) for element in self)

    def any_match(self, predicate: Predicate) -> bool:
        return any(predicate(element) for element in self)

    def none_match(self, predicate: Predicate) -> bool:
        return not self.any_match(predicate)

    def reduce(self, function: Callable[[Any, Any], Any], initial=_NOTHING):
        """Apply a function of two arguments cumulatively to the elements, left to right"""
        if initial is _NOTHING:
            return functools.reduce(function, self)
        return functools.reduce(function, self, initial)

    def group_by(self, key: Transform) -> Dict[Any, List]:
        """Group elements by the result of key, preserving order within groups"""
        groups = {}
        for element in self:
            groups.setdefault(key(element), []).append(element)
        return groups

    def skip(self, n: int) -> Iterator:
        return itertools.islice(self, max(int(n), 0), None)

    def take(self, n: int) -> Iterator:
        return itertools.islice(self, max(int(n), 0))

    def join(self, separator: str = ', ') -> str:
        return separator.join(str(element) for element in self)

    # --------- helpers ----------
    def __repr__(self) -> str:
        limit = self._options.repr_limit
        head = list(itertools.islice(self, limit + 1))
        body = ', '.join(repr(element) for element in head[:limit])
        if len(head) > limit:
            body = body + ', ...' if body else '...'
        return f'{self.__class__.__name__}([{body}])'


class SequenceView(BaseView):
    """
    Root view wrapping a backing sequence it does not own.

    Any Sequence can be viewed; writes need a MutableSequence.
    """
    kind = 'source'

    def __init__(self, backing: Sequence, options: Optional[ViewOptions] = None):
        if not isinstance(backing, Sequence):
            raise InvalidArgumentError(
                f"SequenceView needs an ordered sequence, got {type(backing).__name__}"
            )
        super().__init__(options)
        self._backing = backing

    @classmethod
    def of(cls, *items, options: Optional[ViewOptions] = None) -> 'SequenceView':
        """View over a new list holding items"""
        return cls(list(items), options)

    @classmethod
    def from_iterable(cls, iterable: Iterable, options: Optional[ViewOptions] = None) -> 'SequenceView':
        """View over iterable; sequences are viewed in place, anything else is copied into a list"""
        if isinstance(iterable, BaseView):
            return cls(iterable.to_list(), options or iterable.options)
        if isinstance(iterable, Sequence):
            return cls(iterable, options)
        return cls(list(iterable), options)

    @property
    def backing(self) -> Sequence:
        return self._backing

    def __iter__(self) -> Iterator:
        backing = self._backing
        fail_fast = self._options.fail_fast
        expected = len(backing)
        index = 0
        while index < len(backing):
            if fail_fast and len(backing) != expected:
                raise self._modified(expected)
            yield backing[index]
            index += 1
        if fail_fast and len(backing) != expected:
            raise self._modified(expected)

    def __len__(self) -> int:
        return len(self._backing)

    def __contains__(self, item) -> bool:
        return item in self._backing

    def _modified(self, expected: int) -> ConcurrentModificationError:
        return ConcurrentModificationError(
            f"backing sequence changed size during iteration "
            f"(expected {expected}, now {len(self._backing)})"
        )

    def _writable(self) -> MutableSequence:
        if not isinstance(self._backing, MutableSequence):
            logger.warning(f"Rejected write to read-only {type(self._backing).__name__}")
            raise UnsupportedOperationError(
                f"backing {type(self._backing).__name__} is read-only"
            )
        return self._backing

    def _append(self, item) -> None:
        backing = self._writable()
        backing.append(item)
        logger.debug(f"Appended {item!r} to backing sequence (size now {len(backing)})")

    def _remove_first(self, match: Predicate) -> bool:
        backing = self._writable()
        for index, element in enumerate(backing):
            if match(element):
                del backing[index]
                logger.debug(f"Removed {element!r} at index {index} from backing sequence")
                return True
        return False

    def _remove_all(self, match: Predicate) -> int:
        backing = self._writable()
        doomed = [index for index, element in enumerate(backing) if match(element)]
        for index in reversed(doomed):
            del backing[index]
        if doomed:
            logger.debug(f"Removed {len(doomed)} elements from backing sequence")
        return len(doomed)


class FilteredView(BaseView):
    """Live view exposing only the elements of source satisfying predicate."""
    kind = 'filter'

    def __init__(self, source: BaseView, predicate: Predicate):
        super().__init__(source.options)
        self._source = source
        self._predicate = predicate

    @property
    def source(self) -> BaseView:
        return self._source

    def __iter__(self) -> Iterator:
        predicate = self._predicate
        for element in self._source:
            if predicate(element):
                yield element

    def __contains__(self, item) -> bool:
        return bool(self._predicate(item)) and item in self._source

    def _append(self, item) -> None:
        if not self._predicate(item):
            logger.warning(f"Rejected {item!r}: does not satisfy the filter predicate")
            raise InvalidArgumentError(f"{item!r} does not satisfy the filter predicate")
        self._source._append(item)

    def remove(self, item) -> bool:
        if not self._predicate(item):
            return False
        return self._source._remove_first(lambda element: element == item)

    def _remove_first(self, match: Predicate) -> bool:
        predicate = self._predicate
        return self._source._remove_first(lambda element: bool(predicate(element)) and match(element))

    def _remove_all(self, match: Predicate) -> int:
        predicate = self._predicate
        return self._source._remove_all(lambda element: bool(predicate(element)) and match(element))


class MappedView(BaseView):
    """
    Live view exposing function(element) for every element of source.

    Removal works by scanning for an element whose transformed value is
    equal to the argument. Adding needs an inverse function, since a
    transform cannot in general be undone.
    """
    kind = 'map'

    def __init__(self, source: BaseView, function: Transform, inverse: Optional[Transform] = None):
        super().__init__(source.options)
        self._source = source
        self._function = function
        self._inverse = inverse

    @property
    def source(self) -> BaseView:
        return self._source

    def __iter__(self) -> Iterator:
        function = self._function
        for element in self._source:
            yield function(element)

    def __len__(self) -> int:
        return len(self._source)

    def is_empty(self) -> bool:
        return self._source.is_empty()

    def _append(self, item) -> None:
        if self._inverse is None:
            logger.warning(f"Rejected add of {item!r}: mapped view has no inverse function")
            raise UnsupportedOperationError("cannot add to a mapped view without an inverse function")
        self._source._append(self._inverse(item))

    def _remove_first(self, match: Predicate) -> bool:
        function = self._function
        return self._source._remove_first(lambda element: match(function(element)))

    def _remove_all(self, match: Predicate) -> int:
        function = self._function
        return self._source._remove_all(lambda element: match(function(element)))
