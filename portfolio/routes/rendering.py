"""
File: rendering.py
Purpose: Shared helper that turns a PageData into an HTTP response.
"""
from flask import current_app, Response
from portfolio.classes.template_store import TemplateRenderError


def render_page(template_name, page):
    """Renders a page; on failure logs the cause and answers a bare 500."""
    try:
        return current_app.template_store.render(template_name, page)
    except TemplateRenderError as e:
        current_app.logger.error("Error rendering template %s: %s", e.name, e.cause)
        return Response("Internal Server Error\n", status=500, mimetype='text/plain')
