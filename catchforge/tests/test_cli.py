"""End-to-end tests for the catchforge command line."""

import pytest

from catchforge.__main__ import main
from catchforge.core.project import ProjectLayout
from catchforge.core.synthesis import PRECONDITION_MESSAGE

PLAIN_CLASS = '''package com.example;

public class Plain {
}
'''


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "src" / "main" / "java").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _container_path(project):
    return project / "src/main/java/com/example/exceptionHandler/TestContainer.java"


def _create_container(project):
    return main([
        "--project", str(project),
        "create-handler-container",
        "--named", "TestContainer",
        "--package", "com.example.exceptionHandler",
    ])


def _create_handler(path, *options):
    return main([
        "handler", "create",
        "--file", str(path),
        *options,
    ])


# =========================================================================
# Tests: create-handler-container
# =========================================================================

class TestCreateHandlerContainer:
    def test_creates_container(self, project, capsys):
        assert _create_container(project) == 0

        path = _container_path(project)
        assert path.exists()
        text = path.read_text(encoding="utf-8")
        assert "import org.jboss.solder.exception.control.HandlesExceptions;" in text
        assert "@HandlesExceptions\npublic class TestContainer {" in text

        out = capsys.readouterr().out
        assert "Created Exception Handler Container [com.example.exceptionHandler.TestContainer]" in out

    def test_package_inferred_from_current_directory(self, project, monkeypatch):
        directory = project / "src" / "main" / "java" / "com" / "acme"
        directory.mkdir(parents=True)
        monkeypatch.chdir(directory)

        assert main(["--project", str(project), "create-handler-container", "--named", "Handlers"]) == 0
        assert (directory / "Handlers.java").exists()

    def test_package_required_outside_source_folder(self, project, capsys):
        assert main(["create-handler-container", "--named", "Handlers"]) == 2
        assert "--package" in capsys.readouterr().err

    def test_invalid_class_name(self, project, capsys):
        code = main(["create-handler-container", "--named", "class", "--package", "com.example"])
        assert code == 2
        assert "class name" in capsys.readouterr().err

    def test_existing_container_is_kept(self, project, capsys):
        assert _create_container(project) == 0
        before = _container_path(project).read_text(encoding="utf-8")

        assert _create_container(project) == 1
        assert "--overwrite" in capsys.readouterr().err
        assert _container_path(project).read_text(encoding="utf-8") == before

    def test_configured_annotation_package(self, project):
        (project / "catchforge.yaml").write_text(
            "annotations:\n  package: org.jboss.seam.exception.control\n", encoding="utf-8"
        )
        assert _create_container(project) == 0
        text = _container_path(project).read_text(encoding="utf-8")
        assert "import org.jboss.seam.exception.control.HandlesExceptions;" in text


# =========================================================================
# Tests: handler create
# =========================================================================

class TestHandlerCreate:
    def test_minimal_handler(self, project, capsys):
        _create_container(project)
        path = _container_path(project)

        code = _create_handler(
            path, "--method-name", "throwableHandler", "--exception-type", "java.lang.Throwable"
        )

        assert code == 0
        text = path.read_text(encoding="utf-8")
        assert "public void throwableHandler(@Handles final CaughtException<Throwable> caughtException) {" in text
        assert "import java.lang.Throwable;" not in text
        assert "Added Handler [throwableHandler] to container [com.example.exceptionHandler.TestContainer]" in (
            capsys.readouterr().out
        )

    def test_breadth_first_handler(self, project):
        _create_container(project)
        path = _container_path(project)

        _create_handler(
            path, "--method-name", "throwableHandler", "--exception-type", "Throwable", "--breadth-first"
        )

        text = path.read_text(encoding="utf-8")
        assert "@Handles(during = TraversalMode.BREADTH_FIRST) final CaughtException<Throwable>" in text
        assert "import org.jboss.solder.exception.control.TraversalMode;" in text

    def test_precedence_handlers(self, project):
        _create_container(project)
        path = _container_path(project)

        for name, precedence in [("low", "50"), ("high", "100"), ("framework", "-50"), ("builtIn", "-100")]:
            code = _create_handler(
                path, "--method-name", name, "--exception-type", "Throwable", "--precedence", precedence
            )
            assert code == 0

        text = path.read_text(encoding="utf-8")
        assert "public void low(@Handles(precedence = Precedence.LOW)" in text
        assert "public void high(@Handles(precedence = Precedence.HIGH)" in text
        assert "public void framework(@Handles(precedence = Precedence.FRAMEWORK)" in text
        assert "public void builtIn(@Handles(precedence = Precedence.BUILT_IN)" in text
        assert text.count("import org.jboss.solder.exception.control.Precedence;") == 1

    def test_all_options(self, project):
        _create_container(project)
        path = _container_path(project)

        _create_handler(
            path,
            "--method-name", "creationExceptionHandlerLowBreadthFirst",
            "--exception-type", "javax.enterprise.inject.CreationException",
            "--precedence", "50",
            "--breadth-first",
        )

        text = path.read_text(encoding="utf-8")
        assert "@Handles(during = TraversalMode.BREADTH_FIRST, precedence = Precedence.LOW)" in text
        for name in ("Handles", "TraversalMode", "Precedence", "CaughtException"):
            assert f"import org.jboss.solder.exception.control.{name};" in text
        assert "import javax.enterprise.inject.CreationException;" in text

    def test_not_a_container(self, project, capsys):
        path = project / "src/main/java/com/example/Plain.java"
        path.parent.mkdir(parents=True)
        path.write_text(PLAIN_CLASS, encoding="utf-8")

        code = _create_handler(path, "--method-name", "onThrowable", "--exception-type", "Throwable")

        assert code == 1
        assert PRECONDITION_MESSAGE in capsys.readouterr().err
        assert path.read_text(encoding="utf-8") == PLAIN_CLASS

    def test_missing_file(self, project, capsys):
        code = _create_handler(
            project / "Missing.java", "--method-name", "onThrowable", "--exception-type", "Throwable"
        )
        assert code == 1
        assert "Error finding the class source file" in capsys.readouterr().err

    def test_strict_precedence(self, project, capsys):
        _create_container(project)
        path = _container_path(project)
        before = path.read_text(encoding="utf-8")

        code = _create_handler(
            path,
            "--method-name", "odd",
            "--exception-type", "Throwable",
            "--precedence", "7",
            "--strict-precedence",
        )

        assert code == 2
        assert "Unknown precedence 7" in capsys.readouterr().err
        assert path.read_text(encoding="utf-8") == before

    def test_unknown_precedence_is_lenient_by_default(self, project):
        _create_container(project)
        path = _container_path(project)

        assert _create_handler(
            path, "--method-name", "odd", "--exception-type", "Throwable", "--precedence", "7"
        ) == 0
        assert "public void odd(@Handles final CaughtException<Throwable> caughtException)" in (
            path.read_text(encoding="utf-8")
        )

    def test_import_conflict_warning(self, project, capsys):
        _create_container(project)
        path = _container_path(project)
        text = path.read_text(encoding="utf-8").replace(
            "import org.jboss.solder.exception.control.HandlesExceptions;",
            "import org.jboss.solder.exception.control.HandlesExceptions;\nimport com.other.CreationException;",
        )
        path.write_text(text, encoding="utf-8")

        code = _create_handler(
            path, "--method-name", "onCreation", "--exception-type", "javax.enterprise.inject.CreationException"
        )

        assert code == 0
        assert "Warning: CreationException is already imported as com.other.CreationException" in (
            capsys.readouterr().err
        )
        assert "import javax.enterprise.inject.CreationException;" not in path.read_text(encoding="utf-8")

    def test_invalid_method_name(self, project, capsys):
        _create_container(project)
        code = _create_handler(
            _container_path(project), "--method-name", "not-valid", "--exception-type", "Throwable"
        )
        assert code == 2
        assert "method name" in capsys.readouterr().err

    def test_unwritable_container_file(self, project, monkeypatch, capsys):
        _create_container(project)
        path = _container_path(project)
        before = path.read_text(encoding="utf-8")

        def deny(self, model, overwrite=False):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(ProjectLayout, "save_java_source", deny)
        code = _create_handler(path, "--method-name", "onThrowable", "--exception-type", "Throwable")

        assert code == 1
        err = capsys.readouterr().err
        assert "Error writing the class source file" in err
        assert "Permission denied" in err
        assert path.read_text(encoding="utf-8") == before
