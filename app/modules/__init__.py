"""
Modules package initialization.
This package contains the functional modules of the application.
"""

from app.modules import posts
