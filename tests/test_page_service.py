import pytest

from portfolio.models.daos.content_dao import ContentDAO
from portfolio.services.page_service import PageService, DEMO_PAGES


@pytest.fixture
def service():
    return PageService(ContentDAO())


def test_title_only_pages(service):
    assert service.home().title == 'Andre Kuzma - GoLang Portfolio'
    assert service.about().title == 'About Me'
    assert service.home().projects == ()
    assert service.about().posts == ()


def test_projects_page(service):
    page = service.projects()
    assert page.title == 'My Projects'
    assert len(page.projects) == 4
    assert page.posts == ()


def test_blog_page(service):
    page = service.blog()
    assert page.title == 'My Blog'
    assert [p.slug for p in page.posts] == ['welcome-to-golang-blog']
    assert page.projects == ()


@pytest.mark.parametrize('slug, template_name, title', [
    ('data-discovery', 'demo_pii_discovery', 'Demo: PII Discovery'),
    ('synthetic-data', 'demo_synthetic_data', 'Demo: Synthetic Data Generator'),
    ('consent-manager', 'demo_consent_manager', 'Demo: Consent Manager'),
    ('risk-assessment', 'demo_risk_assessment', 'Demo: Risk Assessment'),
])
def test_demo_pages(service, slug, template_name, title):
    name, page = service.demo(slug)
    assert name == template_name
    assert page.title == title


def test_unknown_demo(service):
    assert 'payments' not in DEMO_PAGES
    with pytest.raises(KeyError):
        service.demo('payments')
