"""
Blueprints package initializer.

Central location for importing all blueprints.
"""

from supervision.blueprints.schedule import schedule_bp
from supervision.blueprints.thesis import thesis_bp

__all__ = ['schedule_bp', 'thesis_bp']
