"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest

from atscribe.contexts.rendering import (
    TemplateFileReadError,
    TemplateNotFoundError,
    TemplateRegistry,
)
from atscribe.contexts.rendering.template_registry import BUNDLED_TEMPLATES_PATH


@pytest.fixture
def registry():
    return TemplateRegistry(BUNDLED_TEMPLATES_PATH)


@pytest.mark.unit
def test_bundled_templates_registered(registry):
    """Test that the three bundled templates are loaded by name."""
    assert registry.names() == ["classic", "minimal", "modern"]
    assert all(registry.has_template(name) for name in registry.names())


@pytest.mark.unit
def test_get_template_returns_source(registry):
    """Test that a template's source text is returned."""
    template = registry.get_template("modern")
    assert template.startswith("# {name}")


@pytest.mark.unit
def test_get_template_not_found(registry):
    """Test error for an unregistered name, listing what is available."""
    with pytest.raises(TemplateNotFoundError) as exc_info:
        registry.get_template("fancy")

    assert exc_info.value.template_name == "fancy"
    assert exc_info.value.available == ["classic", "minimal", "modern"]
    assert "Template 'fancy' not found" in str(exc_info.value)


@pytest.mark.unit
def test_get_template_path(registry):
    """Test getting template file path."""
    path = registry.get_template_path("classic")

    assert isinstance(path, Path)
    assert path.name == "classic.md"
    assert path.exists()


@pytest.mark.unit
def test_missing_directory_gives_empty_registry(tmp_path):
    """Test that a missing templates directory is not an error."""
    registry = TemplateRegistry(tmp_path / "nowhere")
    assert registry.names() == []


@pytest.mark.unit
def test_only_markdown_files_registered(tmp_path):
    """Test that non-.md files in the directory are ignored."""
    (tmp_path / "compact.md").write_text("# {name}\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    registry = TemplateRegistry(tmp_path)

    assert registry.names() == ["compact"]


@pytest.mark.unit
def test_load_template_from_file(registry, tmp_path):
    """Test registering a custom template under a new name."""
    path = tmp_path / "custom.md"
    path.write_text("# {name}\n## Projects\n", encoding="utf-8")

    registry.load_template_from_file("mine", path)

    assert registry.has_template("mine")
    assert registry.get_template("mine") == "# {name}\n## Projects\n"


@pytest.mark.unit
def test_load_template_replaces_existing(registry, tmp_path):
    """Test that registering an existing name replaces its source."""
    path = tmp_path / "modern.md"
    path.write_text("replacement", encoding="utf-8")

    registry.load_template_from_file("modern", path)

    assert registry.get_template("modern") == "replacement"


@pytest.mark.unit
def test_load_template_read_error(registry, tmp_path):
    """Test error when a custom template file cannot be read."""
    missing = tmp_path / "missing.md"

    with pytest.raises(TemplateFileReadError) as exc_info:
        registry.load_template_from_file("mine", missing)

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.original_error, OSError)
    assert not registry.has_template("mine")


@pytest.mark.unit
def test_default_directory_from_environment(monkeypatch, tmp_path):
    """Test that omitting the directory uses the configured templates path."""
    (tmp_path / "compact.md").write_text("# {name}\n", encoding="utf-8")
    monkeypatch.setattr("atscribe.contexts.rendering.template_registry.TEMPLATES_PATH", tmp_path)

    assert TemplateRegistry().names() == ["compact"]
