"""Pure rendering functions: EncodedLocation -> text or HTML strings.

All renderers follow the same pattern:
  - Input: an ``EncodedLocation`` from ``grenloc.codec.encode``
  - Output: str
  - No side effects, no I/O

Presenters (``grenloc.presenters``) decide where the output goes.

Public API:
  - summary: build_summary_text
  - share: build_share_text, build_whatsapp_url
  - sticker: build_sticker_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function. Use
   ``render_template("{name}.html.j2", ...)`` for HTML output.
2. Put the template in ``templates/``.
3. Add tests that call the build function and check the returned string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
