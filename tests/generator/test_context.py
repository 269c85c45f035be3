"""Tests for the single-run bean container."""

from __future__ import annotations

from pathlib import Path

import pytest

from projgen.domain.buildsystem import GradleBuildSystem, MavenBuildSystem
from projgen.domain.description import MutableProjectDescription, ProjectDescription
from projgen.generator.conditions import on_build_system
from projgen.generator.context import ProjectGenerationContext
from projgen.generator.contributor import ProjectContributor
from projgen.generator.errors import (
    BeanCurrentlyInCreationError,
    BeanDefinitionError,
    ContextStateError,
    NoSuchBeanError,
    NoUniqueBeanError,
)


class _Greeter:
    def __init__(self, greeting: str = "hello") -> None:
        self.greeting = greeting
        self.closed = False

    def close(self) -> None:
        self.closed = True


class _Contributor(ProjectContributor):
    def __init__(self, order: int = 0) -> None:
        self.order = order

    def contribute(self, project_root: Path) -> None:
        pass


def _describe(build_system: object = None) -> ProjectDescription:
    return MutableProjectDescription(build_system=build_system)


class TestRegistration:
    def test_generated_names(self) -> None:
        ctx = ProjectGenerationContext()
        assert ctx.register_bean(_Greeter, _Greeter) == "_Greeter#1"
        assert ctx.register_bean(_Greeter, _Greeter) == "_Greeter#2"
        assert ctx.contains_bean("_Greeter#2")

    def test_duplicate_name(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, _Greeter, name="greeter")
        with pytest.raises(BeanDefinitionError, match="already registered"):
            ctx.register_bean(_Greeter, _Greeter, name="greeter")

    def test_supplier_must_be_callable(self) -> None:
        ctx = ProjectGenerationContext()
        with pytest.raises(BeanDefinitionError):
            ctx.register_bean(_Greeter, "not callable")  # type: ignore[arg-type]

    def test_register_after_refresh(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.refresh()
        with pytest.raises(ContextStateError):
            ctx.register_instance(_Greeter())


class TestLookup:
    def test_singleton(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, _Greeter)
        assert ctx.get_bean(_Greeter) is ctx.get_bean(_Greeter)

    def test_lazy_creation(self) -> None:
        calls: list[str] = []
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, lambda: calls.append("made") or _Greeter())
        assert calls == []
        ctx.get_bean(_Greeter)
        ctx.get_bean(_Greeter)
        assert calls == ["made"]

    def test_lookup_by_declared_type(self) -> None:
        def write_readme(project_root: Path) -> None:
            pass

        ctx = ProjectGenerationContext()
        ctx.register_bean(ProjectContributor, lambda: write_readme)
        assert ctx.get_bean(ProjectContributor) is write_readme

    def test_lookup_by_base_type(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Contributor, _Contributor)
        assert isinstance(ctx.get_bean(ProjectContributor), _Contributor)

    def test_no_such_bean(self) -> None:
        ctx = ProjectGenerationContext()
        with pytest.raises(NoSuchBeanError):
            ctx.get_bean(_Greeter)
        assert ctx.get_bean_if_available(_Greeter) is None

    def test_no_unique_bean(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, _Greeter, name="a")
        ctx.register_bean(_Greeter, _Greeter, name="b")
        with pytest.raises(NoUniqueBeanError) as excinfo:
            ctx.get_bean(_Greeter)
        assert excinfo.value.names == ["a", "b"]

    def test_beans_of_type_keep_registration_order(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, lambda: _Greeter("one"), name="one")
        ctx.register_bean(_Greeter, lambda: _Greeter("two"), name="two")
        beans = ctx.get_beans_of_type(_Greeter)
        assert list(beans) == ["one", "two"]
        assert beans["two"].greeting == "two"

    def test_ordered_beans(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(ProjectContributor, lambda: _Contributor(10), name="late")
        ctx.register_bean(ProjectContributor, lambda: _Contributor(-5), name="early")
        ctx.register_bean(ProjectContributor, lambda: _Contributor(), name="middle")
        assert [c.order for c in ctx.ordered_beans(ProjectContributor)] == [-5, 0, 10]

    def test_supplier_may_look_up_other_beans(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, lambda: _Greeter("hi"))
        ctx.register_bean(str, lambda: ctx.get_bean(_Greeter).greeting + "!")
        assert ctx.get_bean(str) == "hi!"

    def test_circular_reference(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, lambda: ctx.get_bean(str), name="greeter")
        ctx.register_bean(str, lambda: ctx.get_bean(_Greeter), name="text")
        with pytest.raises(BeanCurrentlyInCreationError, match="greeter -> text -> greeter"):
            ctx.get_bean(_Greeter)


class TestConditions:
    def test_hidden_before_refresh(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_instance(_describe(MavenBuildSystem()), bean_type=ProjectDescription)
        ctx.register_bean(_Greeter, _Greeter, condition=on_build_system("maven"))
        assert ctx.get_bean_if_available(_Greeter) is None

    def test_kept_when_matching(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_instance(_describe(MavenBuildSystem()), bean_type=ProjectDescription)
        ctx.register_bean(_Greeter, _Greeter, name="m", condition=on_build_system("maven"))
        ctx.register_bean(_Greeter, _Greeter, name="g", condition=on_build_system("gradle"))
        ctx.refresh()
        assert list(ctx.get_beans_of_type(_Greeter)) == ["m"]
        assert not ctx.contains_bean("g")

    def test_dropped_without_description(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, _Greeter, condition=lambda d: True)
        ctx.refresh()
        assert ctx.get_bean_if_available(_Greeter) is None

    def test_condition_sees_dialect(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.register_instance(_describe(GradleBuildSystem("kotlin")), bean_type=ProjectDescription)
        ctx.register_bean(_Greeter, _Greeter, condition=on_build_system("gradle", "groovy"))
        ctx.refresh()
        assert ctx.get_bean_if_available(_Greeter) is None


class TestLifecycle:
    def test_refresh_instantiates_everything(self) -> None:
        created: list[str] = []
        ctx = ProjectGenerationContext()
        ctx.register_bean(_Greeter, lambda: created.append("x") or _Greeter())
        ctx.refresh()
        assert ctx.is_active
        assert created == ["x"]

    def test_refresh_twice(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.refresh()
        with pytest.raises(ContextStateError):
            ctx.refresh()

    def test_close_closes_created_beans(self) -> None:
        with ProjectGenerationContext() as ctx:
            ctx.register_bean(_Greeter, _Greeter)
            ctx.refresh()
            greeter = ctx.get_bean(_Greeter)
        assert greeter.closed
        assert not ctx.is_active

    def test_lookup_after_close(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.close()
        with pytest.raises(ContextStateError):
            ctx.get_bean(_Greeter)

    def test_close_is_idempotent(self) -> None:
        ctx = ProjectGenerationContext()
        ctx.close()
        ctx.close()
