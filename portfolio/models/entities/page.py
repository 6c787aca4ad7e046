"""
File: page.py
Purpose: Value records passed from the page service to the templates.
"""
from dataclasses import dataclass, field
from markupsafe import Markup


@dataclass(frozen=True)
class Project:
    """
    Data Transfer Object for a portfolio project card.
    """
    name: str
    description: str
    demo_path: str
    repo_url: str


@dataclass(frozen=True)
class BlogPost:
    """
    Data Transfer Object for a blog post.

    `content` is pre-trusted HTML. It is stored as Markup so Jinja2 inserts it
    as-is; plain strings are wrapped, never escaped.
    """
    title: str
    content: Markup
    slug: str

    def __post_init__(self):
        if not isinstance(self.content, Markup):
            object.__setattr__(self, 'content', Markup(self.content))


@dataclass(frozen=True)
class PageData:
    """
    Everything a page template may reference. Built fresh per request.
    """
    title: str
    projects: tuple = field(default_factory=tuple)
    posts: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'projects', tuple(self.projects))
        object.__setattr__(self, 'posts', tuple(self.posts))

    def as_context(self):
        """Template variables for this page."""
        return {
            'title': self.title,
            'projects': self.projects,
            'posts': self.posts,
        }
