"""Employee Records API - CRUD, search and filtering of employee records."""

__version__ = "0.1.0"
