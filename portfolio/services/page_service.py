"""
File: page_service.py
Purpose: Service Layer that assembles the data record for each page.
"""
from portfolio.models.entities.page import PageData

HOME_TITLE = 'Andre Kuzma - GoLang Portfolio'
ABOUT_TITLE = 'About Me'
PROJECTS_TITLE = 'My Projects'
BLOG_TITLE = 'My Blog'

# URL slug -> (template name, page title)
DEMO_PAGES = {
    'data-discovery': ('demo_pii_discovery', 'Demo: PII Discovery'),
    'synthetic-data': ('demo_synthetic_data', 'Demo: Synthetic Data Generator'),
    'consent-manager': ('demo_consent_manager', 'Demo: Consent Manager'),
    'risk-assessment': ('demo_risk_assessment', 'Demo: Risk Assessment'),
}


class PageService:
    """
    Builds PageData for the portfolio and demo pages.
    """
    def __init__(self, content_dao):
        self.content_dao = content_dao

    # --- Portfolio ---
    def home(self):
        return PageData(title=HOME_TITLE)

    def about(self):
        return PageData(title=ABOUT_TITLE)

    def projects(self):
        """Projects page with every configured project."""
        return PageData(title=PROJECTS_TITLE, projects=self.content_dao.get_all_projects())

    def blog(self):
        """Blog page with every configured post."""
        return PageData(title=BLOG_TITLE, posts=self.content_dao.get_all_posts())

    # --- Demos ---
    def demo(self, slug):
        """
        Returns (template name, PageData) for a demo page.
        Raises KeyError for an unknown slug.
        """
        template_name, title = DEMO_PAGES[slug]
        return template_name, PageData(title=title)
