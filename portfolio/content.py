"""
File: content.py
Purpose: Read-only content table for the projects and blog pages.
"""

# --- Projects (display order) ---
PROJECTS = [
    {
        'name': 'GDPR Data Discovery',
        'description': 'Intelligent tool for discovering and cataloging PII/SPI data.',
        'demo_path': '/demo/data-discovery',
        'repo_url': 'https://github.com/Kuzma-Dev/go-gdpr-data-discovery-service',
    },
    {
        'name': 'Synthetic Data Generator',
        'description': 'Tool for generating synthetic data for testing.',
        'demo_path': '/demo/synthetic-data',
        'repo_url': 'https://github.com/Kuzma-Dev/go-gdpr-synthetic-data-generator-service',
    },
    {
        'name': 'GDPR Consent Manager',
        'description': 'Manage user consents for GDPR compliance.',
        'demo_path': '/demo/consent-manager',
        'repo_url': 'https://github.com/Kuzma-Dev/go-gdpr-consent-manager-service',
    },
    {
        'name': 'GDPR Risk Assessment',
        'description': 'Tool for assessing data re-identification risk.',
        'demo_path': '/demo/risk-assessment',
        'repo_url': 'https://github.com/Kuzma-Dev/go-gdpr-risk-assessment-service',
    },
]

# --- Blog posts ---
# `content` is trusted HTML and is rendered without escaping.
BLOG_POSTS = [
    {
        'title': 'Welcome to my GoLang blog!',
        'content': 'First post about my GoLang portfolio.',
        'slug': 'welcome-to-golang-blog',
    },
]
