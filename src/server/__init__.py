"""HTTP service for carbon2html."""
