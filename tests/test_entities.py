import dataclasses

import pytest
from markupsafe import Markup

from portfolio.models.entities.page import PageData, Project, BlogPost


def test_page_data_defaults_to_empty_sequences():
    page = PageData(title='About Me')
    assert page.projects == ()
    assert page.posts == ()
    assert page.as_context() == {'title': 'About Me', 'projects': (), 'posts': ()}


def test_page_data_is_immutable():
    page = PageData(title='About Me', projects=[Project('a', 'b', '/c', 'd')])
    assert isinstance(page.projects, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        page.title = 'Other'


def test_blog_post_content_is_trusted_markup():
    post = BlogPost(title='<b>Hi</b>', content='<em>body</em>', slug='hi')
    assert isinstance(post.content, Markup)
    assert str(post.content) == '<em>body</em>'
    # Only content carries the trust; the title stays a plain string
    assert not isinstance(post.title, Markup)


def test_blog_post_keeps_existing_markup():
    body = Markup('<p>x</p>')
    assert BlogPost(title='t', content=body, slug='s').content is body
