"""
VITAE - Versioned Itinerary Typeset As Everything

Publishes a single YAML career description as an HTML page and a PDF document.

Architecture:
- Templating Context: YAML loading, resume data model, HTML rendering
- Rendering Context: PDF layout engine and page-flowing PDF backend
- Delivery Context: HTTP server and static site build
"""

__version__ = "0.1.0"
