"""Page assembly and HTML rendering."""
