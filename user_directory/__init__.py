"""Browser user directory: form validation, date conversion and a session cache over a remote user API."""

__version__ = "0.1.0"
