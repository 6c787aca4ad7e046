import pytest
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from portfolio import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_env(tmp_path):
    """Returns a factory writing the given templates into tmp_path and building an Environment over them."""
    def _make_env(files):
        for filename, source in files.items():
            (tmp_path / filename).write_text(source, encoding='utf-8')
        return Environment(loader=FileSystemLoader(str(tmp_path)), autoescape=True, undefined=StrictUndefined)
    return _make_env
