"""Editor and console themes: model, persisted encoding, registry and editing sessions."""

__version__ = "0.1.0"
