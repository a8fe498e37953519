"""Demo web application serving a landing page and process stats page."""
