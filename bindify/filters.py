"""Combine multiple property filters together."""

from collections.abc import Iterable

from bindify.keys import ResolutionKey
from bindify.metadata.providers import PropertyFilter, PropertyFilterProvider

__all__ = ("CompositePropertyFilter",)


class CompositePropertyFilter(PropertyFilterProvider):
    """A property filter accepting a property only if every provider accepts it.

    Providers without a filter are ignored. With no filter left, every
    property is accepted.
    """

    __slots__ = ("_providers", "_filters")

    _filters: tuple[PropertyFilter, ...] | None

    def __init__(self, providers: Iterable[PropertyFilterProvider]) -> None:
        self._providers = tuple(providers)
        self._filters = None

    @property
    def providers(self) -> tuple[PropertyFilterProvider, ...]:
        return self._providers

    def _get_filters(self) -> tuple[PropertyFilter, ...]:
        if self._filters is None:
            self._filters = tuple(
                property_filter
                for property_filter in (
                    provider.property_filter for provider in self._providers
                )
                if property_filter is not None
            )
        return self._filters

    @property
    def property_filter(self) -> PropertyFilter:
        return self.filter

    def filter(self, candidate: ResolutionKey) -> bool:
        """Check if a property participates in binding.

        Args:
            candidate (ResolutionKey): The property key.

        Returns:
            bool: False as soon as a filter rejects the property; otherwise True.
        """
        for property_filter in self._get_filters():
            if not property_filter(candidate):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositePropertyFilter):
            return NotImplemented
        return self._providers == other._providers

    def __hash__(self) -> int:
        # Providers are not required to be hashable.
        return hash(tuple(type(provider) for provider in self._providers))

    def __repr__(self) -> str:
        return f"CompositePropertyFilter({self._providers!r})"
