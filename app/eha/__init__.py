"""eha - temporary, self-expiring localhost names in the hosts file."""

__version__ = "0.1.0"
