"""Chart payload builders and HTML fragment renderers.

Each module pairs two pure functions:
  - ``build_*_payload``: analysis output -> ``schemas.ChartPayload``
  - ``build_*_html``: ``ChartPayload`` -> HTML fragment (not a full page)

Fragments embed the payload as JSON for the external charting library;
no drawing happens here. No side effects, no I/O, no Prefect decorators.

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - climate: build_climate_payload, build_climate_html
  - elevation: build_elevation_payload, build_elevation_html
  - trend: build_trend_payload, build_trend_html
  - comparison: build_comparison_payload, build_comparison_html

Adding a chart
--------------
1. Create ``renderers/{name}.py`` with a payload builder and an HTML builder::

       from gsl_migration.renderers import render_template

       def build_mychart_html(payload: ChartPayload) -> str:
           return render_template("chart.html.j2", chart=payload, chart_id="mychart")

2. Reuse ``templates/chart.html.j2`` or add ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).

3. Wire into ``flows/build.py``: build the payload in a task, write it with
   ``store.write`` and pass the fragment to ``base.html.j2``.

4. Add tests: build a payload from a small series and assert on its
   domain and the rendered fragment.
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
