"""TshaBot backend: cookie-gated chat relay in front of the OpenAI API."""

__version__ = "1.0.0"
