"""HTML renderer for the listing page and the error page."""

from __future__ import annotations

from html import escape as _html_escape

from backend.models.gym import ErrorViewModel, GymListView

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
</head>
<body>
<main>
{body}
</main>
</body>
</html>
"""


def _esc(text: object) -> str:
    return _html_escape(str(text), quote=True)


def render_page(title: str, body: str) -> str:
    """Wrap an already-escaped body fragment in the site layout."""
    return _PAGE.format(title=_esc(title), body=body)


def render_gym_list(view: GymListView) -> str:
    """
    Render the gym listing page.

    Names appear in the order given, one <li> each. An empty listing renders
    a placeholder paragraph instead of an empty list.
    """
    if not view.gyms:
        body = '<h1>Gyms</h1>\n<p class="empty">No gyms listed.</p>'
    else:
        items = "\n".join(f'  <li class="gym">{_esc(name)}</li>' for name in view.gyms)
        body = f'<h1>Gyms</h1>\n<ul class="gyms">\n{items}\n</ul>'
    return render_page("Gyms", body)


def render_error(view: ErrorViewModel) -> str:
    """Render the generic error page, with the request id when there is one."""
    parts = [
        '<h1 class="text-danger">Error.</h1>',
        '<h2 class="text-danger">An error occurred while processing your request.</h2>',
    ]
    if view.show_request_id:
        parts.append(f"<p><strong>Request ID:</strong> <code>{_esc(view.request_id)}</code></p>")
    return render_page("Error", "\n".join(parts))
