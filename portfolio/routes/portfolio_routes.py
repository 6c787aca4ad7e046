"""
File: portfolio_routes.py
Purpose: Home, about, projects and blog pages.
"""
from flask import Blueprint, current_app
from portfolio.config import ALL_METHODS
from portfolio.routes.rendering import render_page

portfolio_bp = Blueprint('portfolio', __name__)

# --- Home Page ---
@portfolio_bp.route('/', methods=ALL_METHODS)
def home():
    return render_page('index', current_app.page_service.home())

# --- About ---
@portfolio_bp.route('/about', methods=ALL_METHODS)
def about():
    return render_page('about', current_app.page_service.about())

# --- Projects ---
@portfolio_bp.route('/projects', methods=ALL_METHODS)
def projects():
    return render_page('projects', current_app.page_service.projects())

# --- Blog ---
@portfolio_bp.route('/blog', methods=ALL_METHODS)
def blog():
    return render_page('blog', current_app.page_service.blog())
