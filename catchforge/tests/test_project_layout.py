"""Tests for project layout, package inference and persistence."""

import pytest

from catchforge.core.project import ProjectLayout
from catchforge.core.synthesis import HandlerSpec, create_container, create_handler


@pytest.fixture
def layout(tmp_path):
    (tmp_path / "src" / "main" / "java").mkdir(parents=True)
    return ProjectLayout(tmp_path)


# =========================================================================
# Tests: package inference
# =========================================================================

class TestPackageForDirectory:
    def test_directory_inside_source_folder(self, layout, tmp_path):
        directory = tmp_path / "src" / "main" / "java" / "com" / "example"
        directory.mkdir(parents=True)
        assert layout.package_for_directory(directory) == "com.example"

    def test_source_folder_itself(self, layout, tmp_path):
        assert layout.package_for_directory(tmp_path / "src" / "main" / "java") is None

    def test_directory_outside_source_folders(self, layout, tmp_path):
        assert layout.package_for_directory(tmp_path) is None

    def test_non_identifier_directory(self, layout, tmp_path):
        directory = tmp_path / "src" / "main" / "java" / "com" / "my-app"
        directory.mkdir(parents=True)
        assert layout.package_for_directory(directory) is None

    def test_additional_source_folder(self, tmp_path):
        directory = tmp_path / "src" / "generated" / "org" / "acme"
        directory.mkdir(parents=True)
        layout = ProjectLayout(tmp_path, ["src/main/java", "src/generated"])
        assert layout.package_for_directory(directory) == "org.acme"


# =========================================================================
# Tests: persistence
# =========================================================================

class TestSaveAndLoad:
    def test_path_for(self, layout, tmp_path):
        model = create_container("TestContainer", "com.example.exceptionHandler")
        expected = tmp_path.resolve() / "src/main/java/com/example/exceptionHandler/TestContainer.java"
        assert layout.path_for(model) == expected

    def test_save_new_container(self, layout):
        model = create_container("TestContainer", "com.example.exceptionHandler")
        path = layout.save_java_source(model)

        assert path.name == "TestContainer.java"
        assert path.parent.name == "exceptionHandler"
        assert path.parent.parent.name == "example"
        assert path.parent.parent.parent.name == "com"

        loaded = layout.load_java_class(path)
        assert loaded == model
        assert loaded.has_import("org.jboss.solder.exception.control.HandlesExceptions")

    def test_existing_file_is_not_overwritten(self, layout):
        layout.save_java_source(create_container("Handlers", "com.example"))
        with pytest.raises(FileExistsError):
            layout.save_java_source(create_container("Handlers", "com.example"))

    def test_overwrite(self, layout):
        layout.save_java_source(create_container("Handlers", "com.example"))
        path = layout.save_java_source(create_container("Handlers", "com.example"), overwrite=True)
        assert path.exists()

    def test_loaded_class_is_saved_in_place(self, layout):
        path = layout.save_java_source(create_container("Handlers", "com.example"))

        model = layout.load_java_class(path)
        create_handler(model, HandlerSpec("onThrowable", "Throwable"))
        assert layout.save_java_source(model) == path

        reloaded = layout.load_java_class(path)
        assert [m.name for m in reloaded.methods] == ["onThrowable"]

    def test_saving_twice_does_not_duplicate(self, layout):
        model = create_container("Handlers", "com.example")
        path = layout.save_java_source(model)

        create_handler(model, HandlerSpec("onThrowable", "Throwable", precedence=50))
        layout.save_java_source(model)
        first = path.read_text(encoding="utf-8")

        layout.save_java_source(model)
        assert path.read_text(encoding="utf-8") == first

        create_handler(model, HandlerSpec("onError", "java.lang.Error"))
        layout.save_java_source(model)

        reloaded = layout.load_java_class(path)
        assert [m.name for m in reloaded.methods] == ["onThrowable", "onError"]
        assert list(reloaded.imports).count("Precedence") == 1

    def test_crlf_file_keeps_its_line_endings(self, layout, tmp_path):
        path = tmp_path / "src/main/java/com/example/Handlers.java"
        path.parent.mkdir(parents=True)
        path.write_bytes(
            b"package com.example;\r\n"
            b"\r\n"
            b"import org.jboss.solder.exception.control.HandlesExceptions;\r\n"
            b"\r\n"
            b"@HandlesExceptions\r\n"
            b"public class Handlers {\r\n"
            b"    // keep\r\n"
            b"}\r\n"
        )

        model = layout.load_java_class(path)
        create_handler(model, HandlerSpec("onThrowable", "Throwable"))
        layout.save_java_source(model)

        data = path.read_bytes()
        assert b"    // keep\r\n" in data
        assert data.count(b"\n") == data.count(b"\r\n")
        assert data.endswith(b"    }\r\n}\r\n")
        assert [m.name for m in layout.load_java_class(path).methods] == ["onThrowable"]

    def test_missing_file(self, layout, tmp_path):
        with pytest.raises(FileNotFoundError):
            layout.load_java_class(tmp_path / "Missing.java")
