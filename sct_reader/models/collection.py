"""
Queryable collection used to look up and export parsed entities.

A thin chainable wrapper over a list: filter, match attributes, take the
first or last match, group and turn the result into a DataFrame.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union
from collections.abc import Iterable

import pandas as pd

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A chainable collection for filtering parsed sector entities.

    Examples:
        # Find a fix by identifier
        fixes.where(identifier='BIG').first()

        # Airports in class C or above
        airports.filter(lambda a: a.airspace_class.rank <= 2).all()

        # Tabular view
        vors.to_dataframe()
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New QueryableCollection with filtered items
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items by attribute equality. All conditions must match.

        Examples:
            # Exact, case sensitive identifier match
            vors.where(identifier='BPK')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[T]:
        """Return the last item or None if collection is empty."""
        return self._items[-1] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], Any]) -> Dict[Any, List[T]]:
        """
        Group items by a key function.

        Examples:
            # Errors by kind
            errors.group_by(lambda e: e.kind)
        """
        result: Dict[Any, List[T]] = {}
        for item in self._items:
            result.setdefault(key_func(item), []).append(item)
        return result

    def map(self, transform: Callable[[T], Any]) -> 'QueryableCollection[Any]':
        """Transform each item using a function."""
        return QueryableCollection([transform(item) for item in self._items])

    def to_dataframe(self) -> pd.DataFrame:
        """
        Build a DataFrame with one row per item.

        Items must provide ``to_dict()``.
        """
        return pd.DataFrame([item.to_dict() for item in self._items])

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        class_name = self.__class__.__name__
        count = len(self._items)
        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'identifier'):
                preview_items.append(repr(item.identifier))
            elif hasattr(item, 'name'):
                preview_items.append(repr(item.name))
            else:
                preview_items.append(f"<{type(item).__name__}>")
        if count > 3:
            preview_items.append('...')

        preview = '[' + ', '.join(preview_items) + ']'
        return f"{class_name}({preview}, count={count})"
