app_name = "gppz"
__version__ = "0.4.0"
