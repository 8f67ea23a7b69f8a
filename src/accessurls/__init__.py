"""Access URLs: public URLs of an application's Services and Ingresses."""

__version__ = "0.1.0"
