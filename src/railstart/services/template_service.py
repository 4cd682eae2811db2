"""Template service for rendering file bodies with Jinja2."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

PACKAGE_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class TemplateService:
    """Service for loading and rendering the package's template assets.

    Static assets (Ruby and ERB files copied verbatim) and Jinja2 templates
    (README, database config) share one directory. Rendering never adds
    timestamps or other run-dependent values, so output depends only on the
    context passed in.
    """

    def __init__(self, templates_dir: Path | None = None):
        """Initialize template service.

        Args:
            templates_dir: Custom templates directory (defaults to the package templates)
        """
        self.templates_dir = templates_dir or PACKAGE_TEMPLATES_DIR
        self.env = self._create_environment()

    def _create_environment(self) -> Environment:
        """Create the Jinja2 environment.

        Returns:
            Configured Jinja2 Environment
        """
        loader = FileSystemLoader(str(self.templates_dir))
        env = Environment(
            loader=loader,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
        )

        return env

    def render_template(self, template_name: str, context: dict[str, Any] | None = None) -> str:
        """Render a Jinja2 template with given context.

        Args:
            template_name: Template filename (e.g., "README.md.j2")
            context: Template context variables

        Returns:
            Rendered template string

        Raises:
            FileNotFoundError: If the template doesn't exist
        """
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise FileNotFoundError(f"Template not found: {template_name}") from e
        return template.render(**(context or {}))

    def read_asset(self, asset_name: str) -> str:
        """Read a static asset verbatim (no template processing).

        Args:
            asset_name: Asset filename (e.g., "home_controller.rb")

        Returns:
            Asset content

        Raises:
            FileNotFoundError: If the asset doesn't exist
        """
        path = self.templates_dir / asset_name
        if not path.is_file():
            raise FileNotFoundError(f"Template not found: {asset_name}")
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    def list_templates(self) -> list[str]:
        """List available template asset names."""
        if not self.templates_dir.exists():
            return []
        return sorted(p.name for p in self.templates_dir.iterdir() if p.is_file())
