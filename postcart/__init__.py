"""Parse postcard requests from e-mail text, render ASCII postcards, store jobs and build delivery e-mails."""

__version__ = "0.1.0"