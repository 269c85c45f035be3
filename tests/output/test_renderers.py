"""Tests for operation-specific Rich renderers."""

from projgen.output.renderers import render_quiet, render_result
from projgen.services.result import ServiceError, ServiceResult


def _generate_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="generate_project",
        data={
            "project_root": "/tmp/shop",
            "files": ["pom.xml", "src/main/java/App.java"],
            "file_count": 2,
            "description": {},
        },
    )


class TestGenerateRenderer:
    def test_summary(self) -> None:
        output = render_result(_generate_result())
        assert "generate_project" in output
        assert "/tmp/shop" in output
        assert "files: 2" in output
        assert "App.java" not in output

    def test_verbose_shows_tree(self) -> None:
        output = render_result(_generate_result(), verbose=True)
        assert "main/" in output
        assert "App.java" in output


class TestPreviewRenderer:
    def test_table_and_changes(self) -> None:
        result = ServiceResult(
            ok=True,
            op="preview_description",
            data={
                "description": {"name": "shop", "build_system": "maven", "dependencies": ["a:b"]},
                "changed_fields": ["name"],
                "contributors": ["pomContributor"],
            },
        )
        output = render_result(result)
        assert "shop" in output
        assert "a:b" in output
        assert "changed_fields: name" in output
        assert "pomContributor" not in output
        assert "pomContributor" in render_result(result, verbose=True)


class TestPluginsRenderer:
    def test_lists_plugins(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_plugins",
            data={"plugins": ["standard"], "build_systems": ["gradle", "maven"]},
        )
        output = render_result(result)
        assert "standard" in output
        assert "gradle, maven" in output
        assert render_quiet(result) == "standard"


class TestErrorRenderer:
    def test_error_with_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="generate_project",
            error=ServiceError(
                code="DIRECTORY_NOT_EMPTY", message="not empty", detail={"path": "/x"}
            ),
        )
        assert "ERROR" in render_result(result)
        assert "not empty" in render_result(result)
        assert "path: /x" not in render_result(result)
        assert "path: /x" in render_result(result, verbose=True)
