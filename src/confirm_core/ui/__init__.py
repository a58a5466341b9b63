"""Server-rendered confirmation pages.

Templates are read from disk on every request; editing a file under the
templates directory takes effect on the next hit without a restart.
"""
