import logging
from pathlib import Path
from typing import Any, Mapping

from services.errors import TemplateError, TemplateNotFound

logger = logging.getLogger(__name__)


class TemplateLoader:
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def load(self, name: str) -> str:
        path = self.directory / name
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            logger.error("Template not found: %s", path)
            raise TemplateNotFound(name) from exc
        except OSError as exc:
            logger.error("Template read failed: %s (%s)", path, exc)
            raise TemplateError(f"{name}: {exc}") from exc


def render(template: str, mapping: Mapping[str, Any]) -> str:
    """
    Replace the first occurrence of each token with its value.

    Tokens are applied in mapping order and values are inserted verbatim;
    a token missing from the template is skipped.
    """
    out = template
    for token, value in mapping.items():
        out = out.replace(token, str(value), 1)
    return out
