"""
File: __init__.py
Purpose: Application factory. Wires the template store, page service, routes and static files.
"""
from flask import Flask, request
from jinja2 import StrictUndefined
from werkzeug.exceptions import HTTPException

from portfolio import config
from portfolio.classes.template_store import TemplateStore
from portfolio.models.daos.content_dao import ContentDAO
from portfolio.services.page_service import PageService


def create_app(template_dir=None, static_dir=None, templates=None, content_dao=None):
    """
    Builds the Flask application.
    Raises TemplateLoadError if any required template is missing or malformed,
    so a broken template set never reaches the listener.
    """
    app = Flask(
        __name__,
        template_folder=template_dir or config.TEMPLATE_DIR,
        static_folder=static_dir or config.STATIC_DIR,
        static_url_path=config.STATIC_URL_PATH
    )

    # A field the template references but the page does not define is an error, not blank output
    app.jinja_env.undefined = StrictUndefined

    # Attach collaborators so Blueprints reach them through current_app
    app.template_store = TemplateStore.load(
        app.jinja_env,
        config.REQUIRED_TEMPLATES if templates is None else templates
    )
    app.page_service = PageService(content_dao or ContentDAO())
    app.logger.info("Loaded %d templates", len(app.template_store))

    from portfolio.routes.portfolio_routes import portfolio_bp
    from portfolio.routes.demo_routes import demo_bp

    app.register_blueprint(portfolio_bp)
    app.register_blueprint(demo_bp, url_prefix='/demo')

    @app.errorhandler(405)
    def any_method(error):
        """Page routes ignore the method: re-match as GET and run the same view."""
        try:
            endpoint, values = app.url_map.bind_to_environ(request.environ).match(method='GET')
        except HTTPException:
            return error.get_response()
        if endpoint == 'static':
            return error.get_response()
        return app.view_functions[endpoint](**values)

    return app
