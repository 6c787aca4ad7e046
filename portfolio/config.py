"""
File: config.py
Purpose: Fixed server settings, file locations and the template list.
"""
import os

# --- Listener ---
HOST = "0.0.0.0"
PORT = 8080

# --- Paths ---
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
TEMPLATE_DIR = os.path.join(BASE_DIR, 'templates')
STATIC_DIR = os.path.join(BASE_DIR, 'static')
STATIC_URL_PATH = '/static'

# --- Templates ---
# Layouts are extended by the pages; they are validated at startup but never rendered directly.
LAYOUT_TEMPLATES = {
    'base': 'base.html',
}

PAGE_TEMPLATES = {
    'index': 'index.html',
    'about': 'about.html',
    'projects': 'projects.html',
    'blog': 'blog.html',
    'demo_pii_discovery': 'demo_pii_discovery.html',
    'demo_synthetic_data': 'demo_synthetic_data.html',
    'demo_consent_manager': 'demo_consent_manager.html',
    'demo_risk_assessment': 'demo_risk_assessment.html',
}

REQUIRED_TEMPLATES = {**LAYOUT_TEMPLATES, **PAGE_TEMPLATES}

# Page routes answer every method the same way
ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'TRACE', 'CONNECT']

# --- Logging ---
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
