"""
File: template_store.py
Purpose: Loads the fixed set of page templates once and renders them by name.
"""
from types import MappingProxyType
from jinja2 import TemplateError


class TemplateStoreError(Exception):
    """Base class for template store failures."""
    def __init__(self, name, cause):
        super().__init__(f"{name}: {cause}")
        self.name = name
        self.cause = cause


class TemplateLoadError(TemplateStoreError):
    """A required template file is missing or does not compile."""


class TemplateRenderError(TemplateStoreError):
    """A template is unknown or failed while rendering."""


class TemplateStore:
    """
    Read-only collection of compiled templates, keyed by name.
    Built once at startup and shared by every request.
    """
    def __init__(self, templates):
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def load(cls, environment, files):
        """
        Compiles every file in `files` (name -> file name) through `environment`.
        Raises TemplateLoadError on the first file that is missing or malformed.
        """
        templates = {}
        for name, filename in files.items():
            try:
                templates[name] = environment.get_template(filename)
            except (TemplateError, OSError) as e:
                raise TemplateLoadError(name, e) from e
        return cls(templates)

    def __len__(self):
        return len(self._templates)

    def render(self, name, data):
        """Renders template `name` against a PageData and returns the HTML."""
        template = self._templates.get(name)
        if template is None:
            raise TemplateRenderError(name, "template not loaded")
        try:
            return template.render(**data.as_context())
        except Exception as e:
            raise TemplateRenderError(name, e) from e
