"""Version information for extension-exporter package"""

__version__ = "1.0.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))
__author__ = "extension-exporter contributors"
__license__ = "GPL-3.0-or-later"
