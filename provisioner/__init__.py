"""Domain Provisioner: attaches custom domains to hosting-platform projects."""

__version__ = "0.1.0"
