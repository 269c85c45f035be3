"""ProjectGenerationContext — a single-run bean container.

Lifecycle: ``open`` (beans may be registered) -> ``refresh()`` ->
``active`` (lookups only) -> ``close()``.

Beans are lazily created singletons. Lookups match on the type a bean was
registered under (or a subclass of it), never on the runtime type of the
object a supplier returns, so a plain function can be registered as a
``ProjectContributor``.

A bean may carry a *condition*: a predicate over the resolved
:class:`ProjectDescription`. Conditional beans are invisible until
``refresh()`` has resolved the description; they are then kept or
dropped. Conditional beans are discarded when no description is
registered.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from projgen.domain.description import ProjectDescription
from projgen.domain.ordering import sort_by_order
from projgen.generator.conditions import Condition
from projgen.generator.errors import (
    BeanCurrentlyInCreationError,
    BeanDefinitionError,
    ContextStateError,
    NoSuchBeanError,
    NoUniqueBeanError,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_UNSET: Any = object()


@dataclass
class _BeanDefinition:
    name: str
    bean_type: type
    supplier: Callable[[], Any]
    condition: Condition | None = None
    instance: Any = _UNSET

    @property
    def created(self) -> bool:
        return self.instance is not _UNSET


def _assignable(declared: type, requested: type) -> bool:
    if declared is requested:
        return True
    try:
        return issubclass(declared, requested)
    except TypeError:
        # Protocols with data members refuse issubclass().
        return False


class ProjectGenerationContext:
    """Holds the beans taking part in one generation run."""

    def __init__(self) -> None:
        self._definitions: dict[str, _BeanDefinition] = {}
        self._name_counters: Counter[str] = Counter()
        self._in_creation: list[str] = []
        self._state = "open"
        self._conditions_resolved = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_bean(
        self,
        bean_type: type[_T],
        supplier: Callable[[], _T],
        *,
        name: str | None = None,
        condition: Condition | None = None,
    ) -> str:
        """Register a lazily created bean. Returns the bean name."""
        if self._state != "open":
            msg = f"Cannot register beans once the context is {self._state}"
            raise ContextStateError(msg)
        if not callable(supplier):
            msg = f"Supplier for {bean_type.__name__} must be callable"
            raise BeanDefinitionError(msg)

        resolved_name = name or self._generate_name(bean_type)
        if resolved_name in self._definitions:
            msg = f"A bean named {resolved_name!r} is already registered"
            raise BeanDefinitionError(msg)

        self._definitions[resolved_name] = _BeanDefinition(
            name=resolved_name,
            bean_type=bean_type,
            supplier=supplier,
            condition=condition,
        )
        logger.debug("Registered bean %s (%s)", resolved_name, bean_type.__name__)
        return resolved_name

    def register_instance(
        self,
        instance: object,
        *,
        name: str | None = None,
        bean_type: type | None = None,
        condition: Condition | None = None,
    ) -> str:
        """Register an already constructed object as a bean."""
        return self.register_bean(
            bean_type or type(instance),
            lambda: instance,
            name=name,
            condition=condition,
        )

    def _generate_name(self, bean_type: type) -> str:
        base = bean_type.__name__
        while True:
            self._name_counters[base] += 1
            candidate = f"{base}#{self._name_counters[base]}"
            if candidate not in self._definitions:
                return candidate

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def contains_bean(self, name: str) -> bool:
        return name in self._definitions

    def get_bean(self, bean_type: type[_T]) -> _T:
        """Return the single bean registered under *bean_type*.

        Raises:
            NoSuchBeanError: No bean matches.
            NoUniqueBeanError: More than one bean matches.
        """
        candidates = self._candidates(bean_type)
        if not candidates:
            msg = f"No bean of type {bean_type.__name__} is registered"
            raise NoSuchBeanError(msg)
        if len(candidates) > 1:
            raise NoUniqueBeanError(bean_type, [d.name for d in candidates])
        return self._instantiate(candidates[0])

    def get_bean_if_available(self, bean_type: type[_T]) -> _T | None:
        """Like :meth:`get_bean` but returns None when nothing matches."""
        candidates = self._candidates(bean_type)
        if not candidates:
            return None
        if len(candidates) > 1:
            raise NoUniqueBeanError(bean_type, [d.name for d in candidates])
        return self._instantiate(candidates[0])

    def get_beans_of_type(self, bean_type: type[_T]) -> dict[str, _T]:
        """All matching beans keyed by name, in registration order."""
        return {d.name: self._instantiate(d) for d in self._candidates(bean_type)}

    def ordered_beans(self, bean_type: type[_T]) -> list[_T]:
        """All matching beans sorted by ascending ``order``."""
        return sort_by_order(self.get_beans_of_type(bean_type).values())

    def _candidates(self, bean_type: type) -> list[_BeanDefinition]:
        self._check_not_closed()
        return [
            d
            for d in self._definitions.values()
            if _assignable(d.bean_type, bean_type)
            and (d.condition is None or self._conditions_resolved)
        ]

    def _instantiate(self, definition: _BeanDefinition) -> Any:
        if definition.created:
            return definition.instance
        if definition.name in self._in_creation:
            chain = " -> ".join([*self._in_creation, definition.name])
            msg = f"Circular bean reference: {chain}"
            raise BeanCurrentlyInCreationError(msg)
        self._in_creation.append(definition.name)
        try:
            definition.instance = definition.supplier()
        finally:
            self._in_creation.pop()
        return definition.instance

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self._state == "active"

    def refresh(self) -> None:
        """Resolve the description, apply conditions, create all beans."""
        if self._state != "open":
            msg = f"Context cannot be refreshed once {self._state}"
            raise ContextStateError(msg)
        self._state = "refreshing"

        description = self.get_bean_if_available(ProjectDescription)
        for definition in list(self._definitions.values()):
            if definition.condition is None:
                continue
            if description is None or not definition.condition(description):
                logger.debug("Condition not met, skipping bean %s", definition.name)
                del self._definitions[definition.name]
        self._conditions_resolved = True

        for definition in list(self._definitions.values()):
            self._instantiate(definition)
        self._state = "active"

    def close(self) -> None:
        """Close instantiated beans in reverse registration order."""
        if self._state == "closed":
            return
        for definition in reversed(list(self._definitions.values())):
            if not definition.created:
                continue
            closer = getattr(definition.instance, "close", None)
            if not callable(closer):
                continue
            try:
                closer()
            except Exception:
                logger.warning("Failed to close bean %s", definition.name, exc_info=True)
        self._state = "closed"

    def _check_not_closed(self) -> None:
        if self._state == "closed":
            msg = "Context is closed"
            raise ContextStateError(msg)

    def __enter__(self) -> ProjectGenerationContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
