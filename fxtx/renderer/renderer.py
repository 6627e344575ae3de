"""Message template compilation and rendering.

Templates are Jinja2 with strict undefined handling. Dot-prefixed field
references such as ``{{.lat}}`` are rewritten to ``{{ lat }}`` before
compilation.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from fxtx.exceptions import RenderError, TemplateCompileError
from fxtx.renderer.helpers import TEMPLATE_FILTERS, TEMPLATE_GLOBALS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jinja2 import Template

logger = logging.getLogger(__name__)

_TEMPLATE_NAME = "msg_template"
_DOT_REFERENCE = re.compile(r"(\{\{-?\s*)\.(?=[A-Za-z_])")


def _build_environment() -> Environment:
    environment = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=False,
    )
    environment.globals.update(TEMPLATE_GLOBALS)
    environment.filters.update(TEMPLATE_FILTERS)
    return environment


_ENVIRONMENT = _build_environment()


def normalize_source(source: str) -> str:
    """Rewrite dot-prefixed ``{{.name}}`` references to Jinja2 ``{{ name }}``."""
    return _DOT_REFERENCE.sub(r"\1", source)


class MessageRenderer:
    """A compiled message template.

    Instances are immutable and may be shared across threads.
    """

    def __init__(self, source: str, template: Template) -> None:
        self._source = source
        self._template = template

    @property
    def source(self) -> str:
        """Return the template text as configured."""
        return self._source

    @classmethod
    def compile(cls, source: str) -> MessageRenderer:
        """Compile template source.

        Args:
            source: Template text.

        Returns:
            A renderer bound to the compiled template.

        Raises:
            TemplateCompileError: If the template syntax is invalid.
        """
        logger.info("Compiling template", extra={"template": source})
        try:
            template = _ENVIRONMENT.from_string(normalize_source(source))
        except TemplateSyntaxError as error:
            raise TemplateCompileError(
                f"error processing template: {error.message}",
                line=error.lineno,
            ) from error
        return cls(source, template)

    def render(self, params: Mapping[str, Any]) -> str:
        """Render the template against a parameter mapping.

        Args:
            params: Values available to the template, at least ``lat`` and ``lon``.

        Returns:
            The rendered message.

        Raises:
            RenderError: If template execution fails.
        """
        try:
            return self._template.render(params)
        except Exception as error:
            raise RenderError(
                f"error executing message template: {error}",
                context={"template": self._source},
            ) from error

    def __repr__(self) -> str:
        return f"MessageRenderer(source={self._source!r})"
