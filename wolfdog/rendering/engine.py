"""Template rendering engine."""

from __future__ import annotations

import logging
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError

from ..errors import TemplateRenderError
from .partials import PartialRegistry

logger = logging.getLogger(__name__)


def create_environment(partials: PartialRegistry) -> Environment:
    """Create the Jinja2 environment for one generation run.

    Args:
        partials: Frozen registry; its entries are resolvable by
            ``{% include %}``, ``{% import %}`` and ``{% extends %}``

    Returns:
        Configured Jinja2 environment
    """
    if not partials.frozen:
        raise RuntimeError("Partials must be fully registered before compiling templates")

    return Environment(
        loader=DictLoader(dict(partials.partials)),
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )


def compile_template(env: Environment, source: str, target: str) -> Template:
    """Compile a template string.

    Args:
        env: Environment holding the partials
        source: Template source text
        target: Name used in error messages

    Returns:
        Compiled Jinja2 template
    """
    logger.debug(f"Compiling template: {target}")
    try:
        return env.from_string(source)
    except TemplateError as e:
        raise TemplateRenderError(target, str(e)) from e
    except Exception as e:
        raise TemplateRenderError(target, f"{type(e).__name__}: {e}") from e


def render_template(template: Template, scope: dict[str, Any], target: str) -> str:
    """Render a compiled template against ``scope``.

    Args:
        template: Compiled template
        scope: Template scope
        target: Name used in error messages

    Returns:
        Rendered text
    """
    try:
        return template.render(**scope)
    except TemplateError as e:
        raise TemplateRenderError(target, str(e)) from e
    except Exception as e:
        # errors raised by expressions inside the template, e.g. TypeError
        raise TemplateRenderError(target, f"{type(e).__name__}: {e}") from e
