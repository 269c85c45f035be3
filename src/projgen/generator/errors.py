"""Exceptions raised by the generation layer."""

from __future__ import annotations


class ProjectGenerationException(RuntimeError):  # noqa: N818
    """Generation failed while writing project assets."""


class ContextError(RuntimeError):
    """Base class for generation context failures."""


class ContextStateError(ContextError):
    """Operation not allowed in the context's current lifecycle state."""


class BeanDefinitionError(ContextError):
    """A bean registration is invalid (for example a duplicate name)."""


class NoSuchBeanError(ContextError):
    """No bean matches the requested type."""


class NoUniqueBeanError(ContextError):
    """More than one bean matches a single-bean lookup."""

    def __init__(self, bean_type: type, names: list[str]) -> None:
        self.bean_type = bean_type
        self.names = names
        super().__init__(
            f"Expected a single {bean_type.__name__} bean but found {len(names)}: "
            + ", ".join(names)
        )


class BeanCurrentlyInCreationError(ContextError):
    """A bean supplier (indirectly) requested the bean it is creating."""
