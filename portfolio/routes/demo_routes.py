"""
File: demo_routes.py
Purpose: Placeholder pages for the GDPR demo services.
"""
from flask import Blueprint, current_app
from portfolio.config import ALL_METHODS
from portfolio.routes.rendering import render_page

demo_bp = Blueprint('demo', __name__)


def _render_demo(slug):
    template_name, page = current_app.page_service.demo(slug)
    return render_page(template_name, page)


@demo_bp.route('/data-discovery', methods=ALL_METHODS)
def data_discovery():
    return _render_demo('data-discovery')


@demo_bp.route('/synthetic-data', methods=ALL_METHODS)
def synthetic_data():
    return _render_demo('synthetic-data')


@demo_bp.route('/consent-manager', methods=ALL_METHODS)
def consent_manager():
    return _render_demo('consent-manager')


@demo_bp.route('/risk-assessment', methods=ALL_METHODS)
def risk_assessment():
    return _render_demo('risk-assessment')
