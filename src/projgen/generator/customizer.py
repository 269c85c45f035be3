"""Project description customizers.

Customizers run once per generation, before any file is written, in
ascending ``order``. Each one mutates the same description in place, so
when two customizers set the same field the one with the higher order
value runs later and its value is the one that sticks.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Union

from projgen.domain.buildsystem import Language, Packaging
from projgen.domain.naming import clean_package_name, generate_application_name
from projgen.domain.ordering import DEFAULT_ORDER, LOWEST_PRECEDENCE, sort_by_order

if TYPE_CHECKING:
    from projgen.domain.description import MutableProjectDescription

logger = logging.getLogger(__name__)


class ProjectDescriptionCustomizer(ABC):
    """Mutates a :class:`MutableProjectDescription` before generation."""

    order: int = DEFAULT_ORDER

    @abstractmethod
    def customize(self, description: MutableProjectDescription) -> None:
        """Apply changes to *description* in place."""


CustomizerLike = Union[
    ProjectDescriptionCustomizer,
    Callable[["MutableProjectDescription"], None],
]


def apply_customizers(
    description: MutableProjectDescription,
    customizers: Iterable[CustomizerLike],
) -> MutableProjectDescription:
    """Run *customizers* against *description* in ascending order.

    Plain callables are invoked directly. Exceptions propagate: a broken
    customizer aborts the generation run.
    """
    for customizer in sort_by_order(customizers):
        logger.debug("Applying description customizer %r", customizer)
        if isinstance(customizer, ProjectDescriptionCustomizer):
            customizer.customize(description)
        else:
            customizer(description)
    return description


class DefaultsCustomizer(ProjectDescriptionCustomizer):
    """Fill derived fields once every other customizer has run.

    - ``application_name`` is generated from ``name`` when missing.
    - ``language`` defaults to Java, ``packaging`` to jar.
    - an explicit ``package_name`` is normalized to a valid package.
    """

    order = LOWEST_PRECEDENCE

    def customize(self, description: MutableProjectDescription) -> None:
        if not description.application_name:
            description.application_name = generate_application_name(description.name)
        if description.language is None:
            description.language = Language.for_id("java")
        if description.packaging is None:
            description.packaging = Packaging.for_id("jar")
        if description.package_name is not None:
            description.package_name = clean_package_name(description.package_name)
