"""
Flask blueprints for the tossup web UI.
"""

from flask import Blueprint

# Create blueprints
questions_bp = Blueprint('questions', __name__)
# Import routes to register them
from . import questions
