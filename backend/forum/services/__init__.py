"""Service layer: forum use cases orchestrated over Units of Work.

Sub-packages are imported directly (``forum.services.posts.service``...);
this package deliberately re-exports nothing so the core extensions can
import the ports without pulling in every service.
"""
