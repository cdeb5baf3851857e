"""
Template Registry

Loads named Markdown templates from disk and keeps them in memory. Templates are
read once, when the registry is built or when a custom template is registered,
and are never re-read while rendering.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from atscribe.contexts.rendering.exceptions import TemplateFileReadError, TemplateNotFoundError
from atscribe.contexts.rendering.logger import _log_debug

load_dotenv()
BUNDLED_TEMPLATES_PATH = Path(__file__).parent / "templates"
TEMPLATES_PATH = Path(os.getenv("ATSCRIBE_TEMPLATES_PATH", str(BUNDLED_TEMPLATES_PATH)))

TEMPLATE_SUFFIX = ".md"


class TemplateRegistry:
    """
    Registry of named Markdown templates.

    Every *.md file in the templates directory is registered under its stem
    (modern.md -> "modern"). The bundled directory ships "modern", "classic"
    and "minimal".
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory of *.md templates. Defaults to
                            ATSCRIBE_TEMPLATES_PATH from environment, falling
                            back to the bundled templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._templates: Dict[str, str] = {}
        self._load_default_templates()

    def _load_default_templates(self) -> None:
        if not self.templates_path.is_dir():
            _log_debug(f"Templates directory not found: {self.templates_path}")
            return

        for path in sorted(self.templates_path.glob(f"*{TEMPLATE_SUFFIX}")):
            self.load_template_from_file(path.stem, path)

    def load_template_from_file(self, name: str, path: Path) -> None:
        """
        Register a template from a file, replacing any template of the same name.

        Args:
            name: Name to register the template under
            path: Markdown template file

        Raises:
            TemplateFileReadError: If the file cannot be read
        """
        path = Path(path)

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateFileReadError(name, path, original_error=e) from e

        self._templates[name] = content
        _log_debug(f"Registered template '{name}' from {path}")

    def has_template(self, name: str) -> bool:
        """
        Check if a template is registered.

        Args:
            name: Template name

        Returns:
            True if registered, False otherwise
        """
        return name in self._templates

    def get_template(self, name: str) -> str:
        """
        Get a registered template's source.

        Args:
            name: Template name (e.g., 'modern')

        Returns:
            Raw template text

        Raises:
            TemplateNotFoundError: If no template is registered under name
        """
        if name not in self._templates:
            raise TemplateNotFoundError(name, self._templates)
        return self._templates[name]

    def get_template_path(self, name: str) -> Path:
        """Path a template of this name would be loaded from in the templates directory."""
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def names(self) -> List[str]:
        """Registered template names, sorted."""
        return sorted(self._templates)
