"""storefrontctl: storefront template data normalization toolkit."""

__version__ = "0.4.0"
