"""
Astropal localization and content composition service.
"""
