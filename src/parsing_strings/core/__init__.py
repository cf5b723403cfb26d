"""Configuration, logging, enums and exceptions shared by the converters."""
