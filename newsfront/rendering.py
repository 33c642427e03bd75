import logging
from pathlib import Path
from urllib.parse import urlsplit

from jinja2 import TemplateError
from starlette.templating import Jinja2Templates

from newsfront.exceptions import ConfigurationError, RenderError
from newsfront.models.search import SearchState

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"
SAFE_URL_SCHEMES = ("http", "https")


def safe_url(value: str | None) -> str:
    """Pass http(s) URLs through; replace anything else (javascript:, data:, ...) with "#"."""
    if not value:
        return "#"
    try:
        scheme = urlsplit(value).scheme
    except ValueError:
        return "#"
    return value if scheme.lower() in SAFE_URL_SCHEMES else "#"


class PageRenderer:
    """Renders a SearchState into the HTML search page.

    The template is loaded once; a missing or unparsable template is a
    startup failure, not a per-request one.
    """

    def __init__(self, templates_dir: Path, template_name: str = INDEX_TEMPLATE):
        self._templates = Jinja2Templates(directory=str(templates_dir))
        self._templates.env.filters["safe_url"] = safe_url
        try:
            self._template = self._templates.get_template(template_name)
        except TemplateError as e:
            raise ConfigurationError(f"Error parsing template {template_name!r} in {templates_dir}: {e}") from e

    def render(self, state: SearchState) -> str:
        try:
            return self._template.render(search=state)
        except (TemplateError, TypeError, ValueError, AttributeError) as e:
            logger.error("Error executing template: %s", e)
            raise RenderError("Failed to render template") from e
